"""In-memory repository implementations for testing."""

from .audit import InMemoryAuditRecordRepository
from .database import InMemoryDatabase
from .event import InMemoryEventRepository
from .invitation import InMemoryInvitationRepository
from .settings import InMemoryDeliverySettingsRepository

__all__ = [
    "InMemoryAuditRecordRepository",
    "InMemoryDatabase",
    "InMemoryDeliverySettingsRepository",
    "InMemoryEventRepository",
    "InMemoryInvitationRepository",
]
