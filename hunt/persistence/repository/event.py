"""PostgreSQL implementation of Event repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import Event
from hunt.domain.repository import EventRepository
from hunt.domain.value import EventId
from hunt.persistence.mappers import event_to_dict, row_to_event
from hunt.persistence.tables import (
    audit_records_table,
    events_table,
    invitations_table,
)


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        stmt = select(events_table).where(events_table.c.id == event_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        event_dict = event_to_dict(event)

        existing = await self.find_by_id(event.id)
        if existing:
            stmt = (
                update(events_table)
                .where(events_table.c.id == event.id)
                .values(**event_dict)
            )
        else:
            stmt = insert(events_table).values(**event_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return event

    async def delete_cascade(self, event_id: EventId) -> bool:
        """Delete an event with its invitations and audit records.

        Runs inside a savepoint so a failure part way leaves every row in
        place.

        Args:
            event_id: The event to delete

        Returns:
            True if the event existed, False otherwise
        """
        async with self.session.begin_nested():
            exists = await self.session.execute(
                select(events_table.c.id).where(events_table.c.id == event_id)
            )
            if exists.first() is None:
                return False

            invitation_ids = select(invitations_table.c.id).where(
                invitations_table.c.event_id == event_id
            )
            await self.session.execute(
                delete(audit_records_table).where(
                    or_(
                        audit_records_table.c.event_id == event_id,
                        audit_records_table.c.invitation_id.in_(invitation_ids),
                    )
                )
            )
            await self.session.execute(
                delete(invitations_table).where(
                    invitations_table.c.event_id == event_id
                )
            )
            await self.session.execute(
                delete(events_table).where(events_table.c.id == event_id)
            )

        await self.session.flush()
        return True

    async def find_ended_before(self, cutoff: datetime) -> list[Event]:
        """Find events whose end time lies before the cutoff, oldest first."""
        stmt = (
            select(events_table)
            .where(events_table.c.ends_at < cutoff)
            .order_by(events_table.c.ends_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings().all()]
