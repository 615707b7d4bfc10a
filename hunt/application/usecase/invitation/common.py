"""Invitation representation shared by the invitation use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from hunt.domain.model import Invitation
from hunt.domain.value import DeliveryMethod


class InvitationItem(BaseModel):
    """Invitation as returned to operators."""

    invitation_id: UUID
    event_id: UUID
    token: str
    join_link: str
    delivery_method: DeliveryMethod
    recipient: str | None
    is_active: bool
    created_at: datetime
    deactivated_at: datetime | None
    used_at: datetime | None

    @classmethod
    def from_invitation(cls, invitation: Invitation, join_link: str) -> "InvitationItem":
        return cls(
            invitation_id=invitation.id,
            event_id=invitation.event_id,
            token=invitation.token.root,
            join_link=join_link,
            delivery_method=invitation.delivery_method,
            recipient=invitation.recipient,
            is_active=invitation.is_active,
            created_at=invitation.created_at,
            deactivated_at=invitation.deactivated_at,
            used_at=invitation.used_at,
        )
