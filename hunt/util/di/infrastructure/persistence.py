"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hunt.config import Settings
from hunt.domain.repository import (
    AuditRecordRepository,
    DeliverySettingsRepository,
    EventRepository,
    InvitationRepository,
)
from hunt.persistence.database import create_engine, create_session_factory
from hunt.persistence.repository import (
    PostgresAuditRecordRepository,
    PostgresDeliverySettingsRepository,
    PostgresEventRepository,
    PostgresInvitationRepository,
)
from hunt.util.di.base import ProviderBase
from hunt.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Audit records written
        for recorded outcomes (rate limited, failed) are therefore only
        kept when the route returns normally.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, session: AsyncSession) -> EventRepository:
        """Provide Event repository."""
        return PostgresEventRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        """Provide Invitation repository."""
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_audit_record_repository(
        self, session: AsyncSession
    ) -> AuditRecordRepository:
        """Provide AuditRecord repository."""
        return PostgresAuditRecordRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_delivery_settings_repository(
        self, session: AsyncSession
    ) -> DeliverySettingsRepository:
        """Provide DeliverySettings repository."""
        return PostgresDeliverySettingsRepository(session)
