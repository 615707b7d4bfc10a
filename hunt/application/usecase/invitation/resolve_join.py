"""Resolve join use case."""

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunt.domain.error import NotFoundError
from hunt.domain.service import EventService, InvitationService
from hunt.domain.value import InviteToken

NO_LONGER_VALID_MESSAGE = "This invitation is no longer valid."
NOT_FOUND_MESSAGE = "Invitation not found."


class JoinStatus(str, Enum):
    """Outcome of resolving a join token."""

    VALID = "VALID"
    NOT_FOUND = "NOT_FOUND"
    INACTIVE = "INACTIVE"
    EXPIRED = "EXPIRED"


class ResolveJoinRequest(BaseModel):
    """Resolve join request."""

    token: str


class JoinEvent(BaseModel):
    """Public view of the event behind a join link."""

    event_id: UUID
    name: str
    description: str | None
    starts_at: datetime
    ends_at: datetime


class JoinInvitation(BaseModel):
    """Public view of the invitation behind a join link."""

    invitation_id: UUID
    created_at: datetime
    used_at: datetime | None


class ResolveJoinResponse(BaseModel):
    """Resolve join response.

    INACTIVE and EXPIRED share one message so callers cannot tell a
    deactivated link from an ended event.
    """

    status: JoinStatus
    event: JoinEvent | None = None
    invitation: JoinInvitation | None = None
    message: str | None = None


class ResolveJoinUseCase:
    """Use case for checking a join token.

    Read only: resolving a token never modifies the invitation.
    """

    def __init__(
        self, invitation_service: InvitationService, event_service: EventService
    ) -> None:
        """Initialize resolve join use case.

        Args:
            invitation_service: Invitation domain service
            event_service: Event domain service
        """
        self.invitation_service = invitation_service
        self.event_service = event_service

    async def execute(self, request: ResolveJoinRequest) -> ResolveJoinResponse:
        """Resolve a join token.

        Args:
            request: Request with the token

        Returns:
            Response with the event view, or the reason the token is unusable
        """
        redacted = request.token[:8] + "..."
        with logfire.span("resolve_join.execute", token=redacted):
            try:
                token = InviteToken(root=request.token)
            except PydanticValidationError:
                logfire.info("Malformed join token", token=redacted)
                return self._not_found()

            invitation = await self.invitation_service.get_by_token(token)
            if invitation is None:
                return self._not_found()

            if not invitation.is_active:
                logfire.info("Inactive invitation used", token=redacted)
                return ResolveJoinResponse(
                    status=JoinStatus.INACTIVE, message=NO_LONGER_VALID_MESSAGE
                )

            try:
                event = await self.event_service.get_event(invitation.event_id)
            except NotFoundError:
                return self._not_found()

            if event.has_ended(datetime.now(timezone.utc)):
                logfire.info(
                    "Invitation for ended event used",
                    token=redacted,
                    event_id=str(event.id),
                )
                return ResolveJoinResponse(
                    status=JoinStatus.EXPIRED, message=NO_LONGER_VALID_MESSAGE
                )

            logfire.info("Valid join token", token=redacted, event_id=str(event.id))
            return ResolveJoinResponse(
                status=JoinStatus.VALID,
                event=JoinEvent(
                    event_id=event.id,
                    name=event.name,
                    description=event.description,
                    starts_at=event.starts_at,
                    ends_at=event.ends_at,
                ),
                invitation=JoinInvitation(
                    invitation_id=invitation.id,
                    created_at=invitation.created_at,
                    used_at=invitation.used_at,
                ),
            )

    @staticmethod
    def _not_found() -> ResolveJoinResponse:
        return ResolveJoinResponse(
            status=JoinStatus.NOT_FOUND, message=NOT_FOUND_MESSAGE
        )
