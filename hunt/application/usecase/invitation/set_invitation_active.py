"""Set invitation active use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.application.usecase.invitation.common import InvitationItem
from hunt.config import Settings
from hunt.domain.service import InvitationService
from hunt.domain.value import EventId, InvitationId


class SetInvitationActiveRequest(BaseModel):
    """Request to activate or deactivate an invitation."""

    event_id: UUID
    invitation_id: UUID
    active: bool


class SetInvitationActiveResponse(BaseModel):
    """Updated invitation."""

    invitation: InvitationItem


class SetInvitationActiveUseCase(BaseUseCase):
    """Use case for toggling an invitation on or off."""

    def __init__(self, invitation_service: InvitationService, settings: Settings) -> None:
        self.invitation_service = invitation_service
        self.settings = settings

    async def execute(
        self, request: SetInvitationActiveRequest
    ) -> SetInvitationActiveResponse:
        """Toggle the invitation.

        Raises:
            NotFoundError: If the invitation does not belong to the event
        """
        with logfire.span(
            "set_invitation_active.execute",
            invitation_id=str(request.invitation_id),
            active=request.active,
        ):
            invitation = await self.invitation_service.set_active(
                EventId(request.event_id),
                InvitationId(request.invitation_id),
                request.active,
            )
            join_link = self.settings.api.join_link(invitation.token.root)
            return SetInvitationActiveResponse(
                invitation=InvitationItem.from_invitation(invitation, join_link)
            )
