"""Domain layer DI providers."""

from dishka import Scope, provide

from hunt.config import AuthSettings, MailSettings, RateLimitSettings
from hunt.domain.repository import (
    AuditRecordRepository,
    DeliverySettingsRepository,
    EventRepository,
    InvitationRepository,
)
from hunt.domain.service import (
    AuditService,
    DeliverySettingsService,
    EmailSender,
    EventService,
    InvitationService,
    JWTService,
    MailService,
    QuotaService,
)
from hunt.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_event_service(self, event_repository: EventRepository) -> EventService:
        """Provide event domain service."""
        return EventService(event_repository=event_repository)

    @provide
    def get_invitation_service(
        self, invitation_repository: InvitationRepository
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(invitation_repository=invitation_repository)

    @provide
    def get_audit_service(
        self, audit_repository: AuditRecordRepository
    ) -> AuditService:
        """Provide audit domain service."""
        return AuditService(audit_repository=audit_repository)

    @provide
    def get_delivery_settings_service(
        self,
        settings_repository: DeliverySettingsRepository,
        mail_settings: MailSettings,
        rate_limit_settings: RateLimitSettings,
    ) -> DeliverySettingsService:
        """Provide delivery settings domain service."""
        return DeliverySettingsService(
            settings_repository=settings_repository,
            mail_settings=mail_settings,
            rate_limit_settings=rate_limit_settings,
        )

    @provide
    def get_quota_service(
        self,
        audit_repository: AuditRecordRepository,
        delivery_settings_service: DeliverySettingsService,
    ) -> QuotaService:
        """Provide quota domain service."""
        return QuotaService(
            audit_repository=audit_repository,
            delivery_settings_service=delivery_settings_service,
        )

    @provide
    def get_mail_service(self, sender: EmailSender) -> MailService:
        """Provide mail domain service."""
        return MailService(sender=sender)
