"""In-memory event repository for testing."""

from datetime import datetime
from typing import Optional

from hunt.domain.model.event import Event
from hunt.domain.repository.event import EventRepository
from hunt.domain.value import EventId

from .database import InMemoryDatabase


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        return self._db.events.get(event_id)

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        self._db.events[event.id] = event
        return event

    async def delete_cascade(self, event_id: EventId) -> bool:
        """Delete an event with its invitations and audit records."""
        if event_id not in self._db.events:
            return False

        invitation_ids = {
            invitation.id
            for invitation in self._db.invitations.values()
            if invitation.event_id == event_id
        }
        self._db.audit_records[:] = [
            record
            for record in self._db.audit_records
            if record.event_id != event_id
            and record.invitation_id not in invitation_ids
        ]
        for invitation_id in invitation_ids:
            del self._db.invitations[invitation_id]
        del self._db.events[event_id]
        return True

    async def find_ended_before(self, cutoff: datetime) -> list[Event]:
        """Find events whose end time lies before the cutoff, oldest first."""
        ended = [event for event in self._db.events.values() if event.ends_at < cutoff]
        return sorted(ended, key=lambda event: event.ends_at)
