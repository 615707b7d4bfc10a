"""Delete event use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.service import EventService
from hunt.domain.value import EventId


class DeleteEventRequest(BaseModel):
    """Delete event request."""

    event_id: UUID


class DeleteEventUseCase(BaseUseCase):
    """Use case for deleting an event with everything that hangs off it."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: DeleteEventRequest) -> None:
        """Delete the event, its invitations and their audit records.

        Raises:
            NotFoundError: If the event does not exist
        """
        with logfire.span("delete_event.execute", event_id=str(request.event_id)):
            await self.event_service.delete_event(EventId(request.event_id))
