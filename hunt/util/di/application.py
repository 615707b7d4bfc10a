"""Application layer DI providers."""

from dishka import Scope, provide

from hunt.application.usecase.event import DeleteEventUseCase
from hunt.application.usecase.invitation import (
    CreateInvitationUseCase,
    ListAuditRecordsUseCase,
    ListInvitationsUseCase,
    ResolveJoinUseCase,
    SetInvitationActiveUseCase,
)
from hunt.config import Settings
from hunt.domain.service import (
    AuditService,
    DeliverySettingsService,
    EventService,
    InvitationService,
    MailService,
    QuotaService,
)
from hunt.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self,
        event_service: EventService,
        invitation_service: InvitationService,
        quota_service: QuotaService,
        audit_service: AuditService,
        mail_service: MailService,
        delivery_settings_service: DeliverySettingsService,
        settings: Settings,
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(
            event_service=event_service,
            invitation_service=invitation_service,
            quota_service=quota_service,
            audit_service=audit_service,
            mail_service=mail_service,
            delivery_settings_service=delivery_settings_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_set_invitation_active_use_case(
        self, invitation_service: InvitationService, settings: Settings
    ) -> SetInvitationActiveUseCase:
        """Provide set invitation active use case."""
        return SetInvitationActiveUseCase(
            invitation_service=invitation_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_list_invitations_use_case(
        self,
        invitation_service: InvitationService,
        event_service: EventService,
        settings: Settings,
    ) -> ListInvitationsUseCase:
        """Provide list invitations use case."""
        return ListInvitationsUseCase(
            invitation_service=invitation_service,
            event_service=event_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_resolve_join_use_case(
        self, invitation_service: InvitationService, event_service: EventService
    ) -> ResolveJoinUseCase:
        """Provide resolve join use case."""
        return ResolveJoinUseCase(
            invitation_service=invitation_service, event_service=event_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_audit_records_use_case(
        self, audit_service: AuditService
    ) -> ListAuditRecordsUseCase:
        """Provide list audit records use case."""
        return ListAuditRecordsUseCase(audit_service=audit_service)

    # Event use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_event_use_case(
        self, event_service: EventService
    ) -> DeleteEventUseCase:
        """Provide delete event use case."""
        return DeleteEventUseCase(event_service=event_service)
