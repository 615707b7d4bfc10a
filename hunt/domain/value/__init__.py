"""Domain value objects for the invitation dispatch engine."""

from hunt.domain.value.identifiers import (
    AuditRecordId,
    EventId,
    InvitationId,
    OperatorId,
)
from hunt.domain.value.types import (
    DeliveryMethod,
    DispatchOutcome,
    InviteToken,
    OutgoingEmail,
    QuotaWindow,
    RecipientAddress,
    SmtpConfig,
)

__all__ = [
    # Identifiers
    "EventId",
    "InvitationId",
    "AuditRecordId",
    "OperatorId",
    # Types
    "DeliveryMethod",
    "DispatchOutcome",
    "InviteToken",
    "OutgoingEmail",
    "QuotaWindow",
    "RecipientAddress",
    "SmtpConfig",
]
