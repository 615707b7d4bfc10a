"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

EventId = NewType("EventId", UUID)
InvitationId = NewType("InvitationId", UUID)
AuditRecordId = NewType("AuditRecordId", UUID)
OperatorId = NewType("OperatorId", UUID)
