"""PostgreSQL implementation of Invitation repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import Invitation
from hunt.domain.repository import InvitationRepository
from hunt.domain.value import EventId, InvitationId, InviteToken
from hunt.persistence.mappers import invitation_to_dict, row_to_invitation
from hunt.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InviteToken) -> Optional[Invitation]:
        """Find an invitation by its join token.

        Critical path for joining - the token column is uniquely indexed.

        Args:
            token: Join token to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def exists_token(self, token: InviteToken) -> bool:
        """Check whether a join token is already taken."""
        stmt = select(invitations_table.c.id).where(
            invitations_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_event(self, event_id: EventId) -> list[Invitation]:
        """Find all invitations of an event, newest first."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.event_id == event_id)
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_invitation(dict(row)) for row in rows]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update).

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)

        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return invitation

    async def delete(self, invitation_id: InvitationId) -> None:
        """Delete an invitation.

        Audit records keep their row; the foreign key nulls their reference.
        """
        stmt = delete(invitations_table).where(invitations_table.c.id == invitation_id)
        await self.session.execute(stmt)
        await self.session.flush()
