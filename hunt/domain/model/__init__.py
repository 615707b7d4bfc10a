"""Domain model entities for the invitation dispatch engine."""

from hunt.domain.model.audit import AuditRecord
from hunt.domain.model.event import Event
from hunt.domain.model.invitation import Invitation
from hunt.domain.model.settings import DeliverySettings, EffectiveDeliverySettings

__all__ = [
    "AuditRecord",
    "DeliverySettings",
    "EffectiveDeliverySettings",
    "Event",
    "Invitation",
]
