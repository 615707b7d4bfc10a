"""List invitations use case."""

from uuid import UUID

from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.application.usecase.invitation.common import InvitationItem
from hunt.config import Settings
from hunt.domain.service import EventService, InvitationService
from hunt.domain.value import EventId


class ListInvitationsRequest(BaseModel):
    """List invitations request."""

    event_id: UUID


class ListInvitationsResponse(BaseModel):
    """Invitations of an event, newest first."""

    invitations: list[InvitationItem]


class ListInvitationsUseCase(BaseUseCase):
    """Use case for listing the invitations of an event."""

    def __init__(
        self,
        invitation_service: InvitationService,
        event_service: EventService,
        settings: Settings,
    ) -> None:
        self.invitation_service = invitation_service
        self.event_service = event_service
        self.settings = settings

    async def execute(self, request: ListInvitationsRequest) -> ListInvitationsResponse:
        """List invitations.

        Raises:
            NotFoundError: If the event does not exist
        """
        event_id = EventId(request.event_id)
        await self.event_service.get_event(event_id)

        invitations = await self.invitation_service.list_for_event(event_id)
        return ListInvitationsResponse(
            invitations=[
                InvitationItem.from_invitation(
                    invitation, self.settings.api.join_link(invitation.token.root)
                )
                for invitation in invitations
            ]
        )
