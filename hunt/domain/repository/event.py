"""Event repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from hunt.domain.model.event import Event
from hunt.domain.value import EventId


class EventRepository(ABC):
    """Repository for Event entity.

    Events are written by the event management surfaces; the dispatch
    engine reads them and deletes them with all dependent rows.
    """

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Event | None:
        """Find an event by ID.

        Args:
            event_id: The event's unique identifier

        Returns:
            The event if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Save an event (create or update).

        Args:
            event: The event to save

        Returns:
            The saved event
        """
        pass

    @abstractmethod
    async def delete_cascade(self, event_id: EventId) -> bool:
        """Delete an event with its invitations and audit records.

        Removes, as a single all-or-nothing operation, every audit record
        referencing the event or one of its invitations, the invitations,
        and the event itself.

        Args:
            event_id: The event to delete

        Returns:
            True if the event existed, False otherwise
        """
        pass

    @abstractmethod
    async def find_ended_before(self, cutoff: datetime) -> list[Event]:
        """Find events whose end time lies before the cutoff.

        Used by retention cleanup.

        Args:
            cutoff: Exclusive upper bound for ends_at

        Returns:
            Matching events, oldest first
        """
        pass
