"""Repository interfaces for the dispatch engine.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from hunt.domain.repository.audit import AuditRecordRepository
from hunt.domain.repository.event import EventRepository
from hunt.domain.repository.invitation import InvitationRepository
from hunt.domain.repository.settings import DeliverySettingsRepository

__all__ = [
    "AuditRecordRepository",
    "DeliverySettingsRepository",
    "EventRepository",
    "InvitationRepository",
]
