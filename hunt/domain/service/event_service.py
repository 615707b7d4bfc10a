"""Event domain service."""

from datetime import datetime

import logfire

from hunt.domain.error import NotFoundError
from hunt.domain.model.event import Event
from hunt.domain.repository import EventRepository
from hunt.domain.value import EventId

from .base import Service


class EventService(Service):
    """Domain service for the event operations the engine needs."""

    def __init__(self, event_repository: EventRepository) -> None:
        """Initialize event service.

        Args:
            event_repository: Event repository
        """
        self.event_repository = event_repository

    async def get_event(self, event_id: EventId) -> Event:
        """Get an event by ID.

        Raises:
            NotFoundError: If the event does not exist
        """
        event = await self.event_repository.find_by_id(event_id)
        if event is None:
            raise NotFoundError("Event", str(event_id))
        return event

    async def delete_event(self, event_id: EventId) -> None:
        """Delete an event with its invitations and audit records.

        Args:
            event_id: Event ID

        Raises:
            NotFoundError: If the event does not exist
        """
        with logfire.span("event_service.delete_event", event_id=str(event_id)):
            deleted = await self.event_repository.delete_cascade(event_id)
            if not deleted:
                raise NotFoundError("Event", str(event_id))
            logfire.info("Event deleted", event_id=str(event_id))

    async def find_ended_before(self, cutoff: datetime) -> list[Event]:
        """Events that ended before the cutoff."""
        return await self.event_repository.find_ended_before(cutoff)
