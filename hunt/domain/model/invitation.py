"""Invitation entity.

An invitation is a revocable capability: whoever holds the token can join
the event while the invitation is active and the event has not ended.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator

from hunt.domain.model.common import DomainModel
from hunt.domain.value import DeliveryMethod, EventId, InvitationId, InviteToken


class Invitation(DomainModel):
    """Invitation entity.

    Business rules:
    - The token is unique and never changes
    - deactivated_at is set if and only if the invitation is inactive
    - EMAIL invitations always carry a recipient address
    - Invitations are removed together with their event
    """

    id: InvitationId
    event_id: EventId
    token: InviteToken
    delivery_method: DeliveryMethod
    recipient: Optional[str] = None
    is_active: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deactivated_at: Optional[datetime] = None
    used_at: Optional[datetime] = None

    @model_validator(mode="after")
    def check_invariants(self) -> "Invitation":
        """Enforce activation and recipient invariants."""
        if self.is_active and self.deactivated_at is not None:
            raise ValueError("Active invitation cannot have deactivated_at")
        if not self.is_active and self.deactivated_at is None:
            raise ValueError("Inactive invitation requires deactivated_at")
        if self.delivery_method == DeliveryMethod.EMAIL and not (
            self.recipient and self.recipient.strip()
        ):
            raise ValueError("EMAIL invitation requires a recipient")
        return self

    def activated(self) -> "Invitation":
        """Copy of this invitation switched on."""
        return self.model_validate(
            {**self.model_dump(), "is_active": True, "deactivated_at": None}
        )

    def deactivated(self, now: datetime) -> "Invitation":
        """Copy of this invitation switched off at ``now``."""
        return self.model_validate(
            {**self.model_dump(), "is_active": False, "deactivated_at": now}
        )
