"""Domain value objects for the invitation dispatch engine.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import timedelta
from enum import Enum

from pydantic import EmailStr, Field, field_validator

from hunt.domain.value.common import RootValueObject, ValueObject


class DeliveryMethod(str, Enum):
    """How an invitation reaches its recipient."""

    LINK = "LINK"  # Operator shares the join link manually
    EMAIL = "EMAIL"  # Engine mails the join link


class DispatchOutcome(str, Enum):
    """Outcome of one dispatch attempt, as stored in the audit trail.

    Closed set: these are the only values persisted or accepted as filters.
    """

    SENT = "SENT"
    FAILED = "FAILED"
    DISABLED = "DISABLED"
    RATE_LIMITED = "RATE_LIMITED"

    @property
    def consumes_quota(self) -> bool:
        """Whether records with this outcome count against operator quotas."""
        return self is not DispatchOutcome.RATE_LIMITED


class QuotaWindow(str, Enum):
    """Rolling windows over which sends are counted."""

    HOUR = "hour"
    DAY = "day"

    @property
    def duration(self) -> timedelta:
        """Length of the window."""
        if self is QuotaWindow.HOUR:
            return timedelta(hours=1)
        return timedelta(hours=24)


class InviteToken(RootValueObject[str]):
    """Opaque join token.

    Generated tokens are 48 lowercase hex characters (192 random bits).
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is lowercase hex of a plausible length."""
        if not re.fullmatch(r"[0-9a-f]{32,255}", v):
            raise ValueError("Token must be 32-255 lowercase hex characters")
        return v

    @property
    def redacted(self) -> str:
        """Token prefix safe for logs."""
        return self.root[:8] + "..."


class RecipientAddress(RootValueObject[EmailStr]):
    """A single mailbox address.

    Lists and addresses longer than 254 characters are rejected, so one
    dispatch reaches exactly one mailbox. A display name, if given, is
    dropped.
    """

    @field_validator("root", mode="before")
    @classmethod
    def strip_whitespace(cls, v: object) -> object:
        """Trim surrounding whitespace before parsing."""
        return v.strip() if isinstance(v, str) else v


class SmtpConfig(ValueObject):
    """Connection parameters for the mail transport."""

    host: str
    port: int
    username: str
    password: str = Field(repr=False)
    use_tls: bool = False
    timeout_seconds: float = 15.0  # Budget for the whole session


class OutgoingEmail(ValueObject):
    """A fully rendered plain-text message ready for the transport."""

    sender: str  # "Name <address>" or bare address
    recipient: EmailStr
    subject: str
    body: str
