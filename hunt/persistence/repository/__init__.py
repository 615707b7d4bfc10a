"""PostgreSQL repository implementations."""

from hunt.persistence.repository.audit import PostgresAuditRecordRepository
from hunt.persistence.repository.event import PostgresEventRepository
from hunt.persistence.repository.invitation import PostgresInvitationRepository
from hunt.persistence.repository.settings import PostgresDeliverySettingsRepository

__all__ = [
    "PostgresAuditRecordRepository",
    "PostgresDeliverySettingsRepository",
    "PostgresEventRepository",
    "PostgresInvitationRepository",
]
