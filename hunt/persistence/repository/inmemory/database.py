"""Shared in-memory store for the in-memory repositories."""

from dataclasses import dataclass, field
from typing import Optional

from hunt.domain.model import AuditRecord, DeliverySettings, Event, Invitation
from hunt.domain.value import EventId, InvitationId


@dataclass
class InMemoryDatabase:
    """Rows shared by the in-memory repositories.

    A single instance lives for the whole container so state survives
    across requests, like a database would.
    """

    events: dict[EventId, Event] = field(default_factory=dict)
    invitations: dict[InvitationId, Invitation] = field(default_factory=dict)
    audit_records: list[AuditRecord] = field(default_factory=list)
    delivery_settings: Optional[DeliverySettings] = None
