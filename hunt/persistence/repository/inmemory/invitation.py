"""In-memory invitation repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from hunt.domain.model.invitation import Invitation
from hunt.domain.repository.invitation import InvitationRepository
from hunt.domain.value import EventId, InvitationId, InviteToken

from .database import InMemoryDatabase


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        return self._db.invitations.get(invitation_id)

    async def find_by_token(self, token: InviteToken) -> Optional[Invitation]:
        """Find an invitation by its join token."""
        for invitation in self._db.invitations.values():
            if invitation.token == token:
                return invitation
        return None

    async def exists_token(self, token: InviteToken) -> bool:
        """Check whether a join token is already taken."""
        return await self.find_by_token(token) is not None

    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """Find all invitations of an event, newest first."""
        matches = [
            invitation
            for invitation in self._db.invitations.values()
            if invitation.event_id == event_id
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If another invitation already uses the token
        """
        if invitation.id not in self._db.invitations:
            if await self.exists_token(invitation.token):
                raise IntegrityError("Duplicate join token", None, Exception())

        self._db.invitations[invitation.id] = invitation
        return invitation

    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation, detaching audit records that reference it."""
        self._db.invitations.pop(invitation_id, None)
        self._db.audit_records[:] = [
            record.model_copy(update={"invitation_id": None})
            if record.invitation_id == invitation_id
            else record
            for record in self._db.audit_records
        ]
