"""Create invitation use case (dispatch orchestrator)."""

from contextlib import AsyncExitStack
from enum import Enum
from uuid import UUID

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hunt.application.usecase.base import BaseUseCase
from hunt.application.usecase.invitation.common import InvitationItem
from hunt.config import Settings
from hunt.domain.error import (
    DeliveryDisabledError,
    DeliveryError,
    InvalidDispatchRequestError,
)
from hunt.domain.model import Event, Invitation
from hunt.domain.service import (
    AuditService,
    DeliverySettingsService,
    EventService,
    InvitationService,
    MailService,
    QuotaDecision,
    QuotaService,
)
from hunt.domain.value import (
    DeliveryMethod,
    DispatchOutcome,
    EventId,
    OperatorId,
    RecipientAddress,
)

DISABLED_MESSAGE = "Email delivery is not configured"


class DispatchResult(str, Enum):
    """Caller-visible result of a dispatch request."""

    CREATED = "CREATED"  # LINK invitation, nothing sent
    SENT = "SENT"
    DISABLED = "DISABLED"  # Invitation kept, mail disabled mid-flight
    RATE_LIMITED = "RATE_LIMITED"
    FAILED = "FAILED"  # Invitation kept, transport failed


class CreateInvitationRequest(BaseModel):
    """Request to create an invitation and optionally email it."""

    event_id: UUID
    delivery_method: DeliveryMethod
    recipient: str | None = None
    operator_id: UUID | None = None


class CreateInvitationResponse(BaseModel):
    """Response after a dispatch request."""

    result: DispatchResult
    invitation: InvitationItem | None = None
    message: str | None = None
    retry_after_seconds: int | None = None


class CreateInvitationUseCase(BaseUseCase):
    """Issue an invitation and, for EMAIL, deliver it.

    Every outcome past the request boundary leaves exactly one audit
    record. Quota is checked twice for EMAIL: once before the token is
    issued and once right before sending. The second check narrows the
    window in which concurrent dispatches can overshoot a ceiling but
    does not close it.
    """

    def __init__(
        self,
        event_service: EventService,
        invitation_service: InvitationService,
        quota_service: QuotaService,
        audit_service: AuditService,
        mail_service: MailService,
        delivery_settings_service: DeliverySettingsService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            event_service: Event domain service
            invitation_service: Invitation domain service
            quota_service: Quota domain service
            audit_service: Audit domain service
            mail_service: Mail domain service
            delivery_settings_service: Delivery settings domain service
            settings: Application settings
        """
        self.event_service = event_service
        self.invitation_service = invitation_service
        self.quota_service = quota_service
        self.audit_service = audit_service
        self.mail_service = mail_service
        self.delivery_settings_service = delivery_settings_service
        self.settings = settings

    async def execute(
        self, request: CreateInvitationRequest
    ) -> CreateInvitationResponse:
        """Execute the dispatch.

        Args:
            request: Dispatch request

        Returns:
            Response describing the recorded outcome

        Raises:
            InvalidDispatchRequestError: EMAIL without a recipient, or a
                recipient that is not a single mailbox address
            DeliveryDisabledError: EMAIL while mail is not configured
            NotFoundError: If the event does not exist
        """
        event_id = EventId(request.event_id)
        operator_id = OperatorId(request.operator_id) if request.operator_id else None
        recipient = self._parse_recipient(request.recipient)
        method = request.delivery_method

        with logfire.span(
            "create_invitation.execute",
            event_id=str(event_id),
            delivery_method=method.value,
            operator_id=str(operator_id) if operator_id else None,
        ):
            if method == DeliveryMethod.EMAIL and recipient is None:
                raise InvalidDispatchRequestError(
                    "A recipient email address is required for EMAIL delivery"
                )

            event = await self.event_service.get_event(event_id)

            if method == DeliveryMethod.EMAIL:
                settings = await self.delivery_settings_service.current()
                if not settings.email_sending_enabled:
                    logfire.warn("Email dispatch rejected: mail not configured")
                    raise DeliveryDisabledError(DISABLED_MESSAGE)

                decision = await self.quota_service.check(operator_id)
                if not decision.allowed:
                    subject = self.mail_service.render_invitation(event, "").subject
                    await self.audit_service.record(
                        recipient=recipient,
                        subject=subject,
                        outcome=DispatchOutcome.RATE_LIMITED,
                        event_id=event_id,
                        operator_id=operator_id,
                        error_message=decision.message,
                    )
                    return self._rate_limited(decision)

            async with AsyncExitStack() as stack:
                invitation = await self.invitation_service.issue(
                    event_id, method, recipient
                )
                join_link = self.settings.api.join_link(invitation.token.root)

                if method == DeliveryMethod.LINK:
                    logfire.info(
                        "Link invitation created", invitation_id=str(invitation.id)
                    )
                    return CreateInvitationResponse(
                        result=DispatchResult.CREATED,
                        invitation=InvitationItem.from_invitation(
                            invitation, join_link
                        ),
                    )

                return await self._send(
                    stack, event, invitation, join_link, operator_id
                )

    async def _send(
        self,
        stack: AsyncExitStack,
        event: Event,
        invitation: Invitation,
        join_link: str,
        operator_id: OperatorId | None,
    ) -> CreateInvitationResponse:
        """Render, re-check and deliver an EMAIL invitation."""
        recipient = invitation.recipient
        item = InvitationItem.from_invitation(invitation, join_link)
        rendered = self.mail_service.render_invitation(event, join_link)

        settings = await self.delivery_settings_service.current()
        if not settings.email_sending_enabled:
            # Settings changed since the boundary check. The invitation stays.
            await self.audit_service.record(
                recipient=recipient,
                subject=rendered.subject,
                outcome=DispatchOutcome.DISABLED,
                event_id=event.id,
                invitation_id=invitation.id,
                operator_id=operator_id,
                error_message=DISABLED_MESSAGE,
            )
            logfire.warn(
                "Email disabled mid-dispatch", invitation_id=str(invitation.id)
            )
            return CreateInvitationResponse(
                result=DispatchResult.DISABLED,
                invitation=item,
                message=f"{DISABLED_MESSAGE}. Share the join link manually.",
            )

        decision = await self.quota_service.check(operator_id)
        if not decision.allowed:
            # Compensate: the unsent token must not outlive this request
            stack.push_async_callback(self.invitation_service.discard, invitation.id)
            await self.audit_service.record(
                recipient=recipient,
                subject=rendered.subject,
                outcome=DispatchOutcome.RATE_LIMITED,
                event_id=event.id,
                operator_id=operator_id,
                error_message=decision.message,
            )
            return self._rate_limited(decision)

        sender = self.mail_service.sender_identity(event, settings)
        try:
            await self.mail_service.deliver(recipient, rendered, sender, settings)
        except DeliveryError as e:
            await self.audit_service.record(
                recipient=recipient,
                subject=rendered.subject,
                outcome=DispatchOutcome.FAILED,
                event_id=event.id,
                invitation_id=invitation.id,
                operator_id=operator_id,
                error_message=str(e),
            )
            return CreateInvitationResponse(
                result=DispatchResult.FAILED,
                invitation=item,
                message=f"Invitation created but the email could not be sent: {e}",
            )

        await self.audit_service.record(
            recipient=recipient,
            subject=rendered.subject,
            outcome=DispatchOutcome.SENT,
            event_id=event.id,
            invitation_id=invitation.id,
            operator_id=operator_id,
        )
        return CreateInvitationResponse(result=DispatchResult.SENT, invitation=item)

    @staticmethod
    def _parse_recipient(raw: str | None) -> str | None:
        """Normalize a recipient to one address, or None when blank.

        Raises:
            InvalidDispatchRequestError: If the value is not a single address
        """
        if raw is None or not raw.strip():
            return None
        try:
            return RecipientAddress(root=raw).root
        except PydanticValidationError as e:
            raise InvalidDispatchRequestError(
                "Recipient must be a single valid email address"
            ) from e

    @staticmethod
    def _rate_limited(decision: QuotaDecision) -> CreateInvitationResponse:
        return CreateInvitationResponse(
            result=DispatchResult.RATE_LIMITED,
            message=decision.message,
            retry_after_seconds=decision.retry_after_seconds,
        )
