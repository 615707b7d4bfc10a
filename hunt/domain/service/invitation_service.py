"""Invitation domain service (token issuer)."""

import secrets
from datetime import datetime, timezone
from uuid import uuid4

import logfire

from hunt.domain.error import BusinessRuleViolationError, NotFoundError
from hunt.domain.model.invitation import Invitation
from hunt.domain.repository import InvitationRepository
from hunt.domain.value import (
    DeliveryMethod,
    EventId,
    InvitationId,
    InviteToken,
)

from .base import Service

TOKEN_BYTES = 24
MAX_TOKEN_ATTEMPTS = 3


def generate_token() -> InviteToken:
    """Generate an unguessable join token (192 bits, hex encoded)."""
    return InviteToken(root=secrets.token_hex(TOKEN_BYTES))


class InvitationService(Service):
    """Domain service issuing and managing join tokens."""

    def __init__(self, invitation_repository: InvitationRepository) -> None:
        """Initialize invitation service.

        Args:
            invitation_repository: Invitation repository
        """
        self.invitation_repository = invitation_repository

    async def issue(
        self,
        event_id: EventId,
        delivery_method: DeliveryMethod,
        recipient: str | None = None,
    ) -> Invitation:
        """Create a new active invitation with a fresh token.

        Args:
            event_id: Owning event
            delivery_method: LINK or EMAIL
            recipient: Recipient address, required for EMAIL

        Returns:
            Created invitation

        Raises:
            BusinessRuleViolationError: If no unused token could be generated
        """
        with logfire.span(
            "invitation_service.issue",
            event_id=str(event_id),
            delivery_method=delivery_method.value,
        ):
            token = await self._unused_token()

            invitation = Invitation(
                id=InvitationId(uuid4()),
                event_id=event_id,
                token=token,
                delivery_method=delivery_method,
                recipient=recipient,
                is_active=True,
                created_at=datetime.now(timezone.utc),
            )

            saved = await self.invitation_repository.save(invitation)
            logfire.info(
                "Invitation issued",
                invitation_id=str(saved.id),
                event_id=str(event_id),
                token=token.redacted,
            )
            return saved

    async def _unused_token(self) -> InviteToken:
        for _ in range(MAX_TOKEN_ATTEMPTS):
            token = generate_token()
            if not await self.invitation_repository.exists_token(token):
                return token
            logfire.warn("Join token collision", token=token.redacted)
        raise BusinessRuleViolationError("Could not generate a unique join token")

    async def get_by_token(self, token: InviteToken) -> Invitation | None:
        """Resolve a join token.

        Args:
            token: Join token

        Returns:
            Invitation if found, None otherwise
        """
        with logfire.span("invitation_service.get_by_token", token=token.redacted):
            invitation = await self.invitation_repository.find_by_token(token)
            if invitation:
                logfire.info(
                    "Invitation found",
                    invitation_id=str(invitation.id),
                    is_active=invitation.is_active,
                )
            else:
                logfire.warn("Invitation not found", token=token.redacted)
            return invitation

    async def get_for_event(
        self, event_id: EventId, invitation_id: InvitationId
    ) -> Invitation:
        """Load an invitation that must belong to the given event.

        Args:
            event_id: Expected owning event
            invitation_id: Invitation ID

        Returns:
            The invitation

        Raises:
            NotFoundError: If missing or owned by another event
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if invitation is None or invitation.event_id != event_id:
            raise NotFoundError("Invitation", str(invitation_id))
        return invitation

    async def set_active(
        self, event_id: EventId, invitation_id: InvitationId, active: bool
    ) -> Invitation:
        """Activate or deactivate an invitation.

        Deactivation stamps deactivated_at; activation clears it.

        Args:
            event_id: Owning event
            invitation_id: Invitation ID
            active: Desired state

        Returns:
            Updated invitation

        Raises:
            NotFoundError: If the invitation does not belong to the event
        """
        with logfire.span(
            "invitation_service.set_active",
            event_id=str(event_id),
            invitation_id=str(invitation_id),
            active=active,
        ):
            invitation = await self.get_for_event(event_id, invitation_id)

            if active:
                updated = invitation.activated()
            else:
                updated = invitation.deactivated(datetime.now(timezone.utc))

            saved = await self.invitation_repository.save(updated)
            logfire.info(
                "Invitation activation changed",
                invitation_id=str(invitation_id),
                is_active=saved.is_active,
            )
            return saved

    async def discard(self, invitation_id: InvitationId) -> None:
        """Remove an invitation that must not stay usable.

        Args:
            invitation_id: Invitation ID
        """
        with logfire.span(
            "invitation_service.discard", invitation_id=str(invitation_id)
        ):
            await self.invitation_repository.delete(invitation_id)
            logfire.info("Invitation discarded", invitation_id=str(invitation_id))

    async def list_for_event(self, event_id: EventId) -> list[Invitation]:
        """List all invitations of an event, newest first.

        Args:
            event_id: Event ID

        Returns:
            List of invitations
        """
        with logfire.span("invitation_service.list_for_event", event_id=str(event_id)):
            invitations = await self.invitation_repository.find_by_event(event_id)
            logfire.info(
                "Invitations listed", event_id=str(event_id), count=len(invitations)
            )
            return invitations
