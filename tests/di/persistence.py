"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hunt.domain.repository import (
    AuditRecordRepository,
    DeliverySettingsRepository,
    EventRepository,
    InvitationRepository,
)
from hunt.persistence.repository.inmemory import (
    InMemoryAuditRecordRepository,
    InMemoryDatabase,
    InMemoryDeliverySettingsRepository,
    InMemoryEventRepository,
    InMemoryInvitationRepository,
)
from hunt.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store is APP-scoped so every request against one container sees
    the same rows; each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory store."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, database: InMemoryDatabase) -> EventRepository:
        """Provide in-memory event repository."""
        return InMemoryEventRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(
        self, database: InMemoryDatabase
    ) -> InvitationRepository:
        """Provide in-memory invitation repository."""
        return InMemoryInvitationRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_audit_record_repository(
        self, database: InMemoryDatabase
    ) -> AuditRecordRepository:
        """Provide in-memory audit record repository."""
        return InMemoryAuditRecordRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_delivery_settings_repository(
        self, database: InMemoryDatabase
    ) -> DeliverySettingsRepository:
        """Provide in-memory delivery settings repository."""
        return InMemoryDeliverySettingsRepository(database)
