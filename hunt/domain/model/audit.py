"""Audit record entity.

Audit records are append-only. They are the single source of truth for
quota accounting: operator quotas are counted over these rows.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from hunt.domain.model.common import DomainModel
from hunt.domain.value import (
    AuditRecordId,
    DispatchOutcome,
    EventId,
    InvitationId,
    OperatorId,
)

MAX_ERROR_MESSAGE_LENGTH = 255


class AuditRecord(DomainModel):
    """Immutable log entry for one dispatch attempt."""

    id: AuditRecordId
    recipient: str
    subject: str
    outcome: DispatchOutcome
    error_message: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: Optional[EventId] = None
    invitation_id: Optional[InvitationId] = None
    operator_id: Optional[OperatorId] = None

    @field_validator("error_message")
    @classmethod
    def truncate_error_message(cls, v: Optional[str]) -> Optional[str]:
        """Keep stored error descriptions short."""
        if v is None:
            return None
        return v[:MAX_ERROR_MESSAGE_LENGTH]
