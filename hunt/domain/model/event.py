"""Event entity.

Events are owned by the event management surfaces. The dispatch engine
only reads them (to address and render invitations) and deletes them
together with everything that references them.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from hunt.domain.model.common import DomainModel
from hunt.domain.value import EventId


class Event(DomainModel):
    """Event entity - the target of invitations."""

    id: EventId
    name: str
    description: Optional[str] = None
    starts_at: datetime
    ends_at: datetime

    # Per-event sender identity, falls back to the delivery settings
    sender_email: Optional[str] = None
    sender_name: Optional[str] = None

    # Per-event templates, fall back to the built-in defaults
    invitation_email_subject: Optional[str] = None
    invitation_email_body: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def has_ended(self, now: datetime) -> bool:
        """Whether the event end time lies before ``now``."""
        return self.ends_at < now
