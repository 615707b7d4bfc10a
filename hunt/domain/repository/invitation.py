"""Invitation repository interface."""

from abc import ABC, abstractmethod

from hunt.domain.model.invitation import Invitation
from hunt.domain.value import EventId, InvitationId, InviteToken


class InvitationRepository(ABC):
    """Repository for Invitation entity."""

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Invitation | None:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InviteToken) -> Invitation | None:
        """Find an invitation by token.

        Used when someone opens a join link.

        Args:
            token: The join token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_token(self, token: InviteToken) -> bool:
        """Check whether a token is already taken.

        Args:
            token: The join token

        Returns:
            True if an invitation uses the token
        """
        pass

    @abstractmethod
    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """Find all invitations of an event, newest first.

        Args:
            event_id: The owning event

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation.

        Audit records that reference it keep their row with the reference
        cleared.

        Args:
            invitation_id: The invitation to delete
        """
        pass
