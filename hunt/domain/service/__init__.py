"""Domain services."""

from .audit_service import AuditService
from .base import Service
from .delivery_settings_service import DeliverySettingsService
from .event_service import EventService
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .mail_service import EmailSender, MailService, RenderedInvitation
from .quota_service import QuotaDecision, QuotaService

__all__ = [
    "AuditService",
    "DeliverySettingsService",
    "EmailSender",
    "EventService",
    "InvitationService",
    "JWTService",
    "MailService",
    "QuotaDecision",
    "QuotaService",
    "RenderedInvitation",
    "Service",
]
