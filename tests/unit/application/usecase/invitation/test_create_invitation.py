"""Tests for create invitation use case."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from hunt.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
    DispatchResult,
)
from hunt.config import Settings
from hunt.domain.error import (
    DeliveryDisabledError,
    DeliveryError,
    InvalidDispatchRequestError,
    NotFoundError,
)
from hunt.domain.model import EffectiveDeliverySettings, Event
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
    MailService,
    QuotaDecision,
    QuotaService,
)
from hunt.domain.value import DeliveryMethod, DispatchOutcome, QuotaWindow
from tests.conftest import make_delivery_settings, make_event
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

ENABLED = EffectiveDeliverySettings(
    smtp_host="smtp.example.org",
    smtp_port=587,
    smtp_user="mailer",
    smtp_password="s3cret",
    smtp_from_address="hunt@example.org",
)
DISABLED = EffectiveDeliverySettings()
DENIED = QuotaDecision(
    allowed=False,
    message="Limit reached (2 per hour).",
    window=QuotaWindow.HOUR,
    limit=2,
    retry_after_seconds=120,
)


async def seed(env, with_delivery: bool = True, **delivery_overrides) -> Event:
    """Store an event and, optionally, a working mail configuration."""
    event = await (await env.get(EventRepository)).save(make_event())
    if with_delivery:
        settings_repo = await env.get(DeliverySettingsRepository)
        await settings_repo.save(make_delivery_settings(**delivery_overrides))
    return event


async def build_use_case(env, **overrides) -> CreateInvitationUseCase:
    """Use case wired from the test container, with selected collaborators replaced."""
    dependencies = {
        "event_service": await env.get(EventService),
        "invitation_service": await env.get(InvitationService),
        "quota_service": await env.get(QuotaService),
        "audit_service": await env.get(AuditService),
        "mail_service": await env.get(MailService),
        "delivery_settings_service": await env.get(DeliverySettingsService),
        "settings": await env.get(Settings),
    }
    dependencies.update(overrides)
    return CreateInvitationUseCase(**dependencies)


def email_request(event: Event, operator_id=None, recipient="player@example.org"):
    return CreateInvitationRequest(
        event_id=event.id,
        delivery_method=DeliveryMethod.EMAIL,
        recipient=recipient,
        operator_id=operator_id or uuid4(),
    )


class TestLinkDispatch:
    """LINK invitations never touch quota or transport."""

    @pytest.mark.asyncio
    async def test_link_without_operator_or_transport(self, unit_env):
        # Arrange
        event = await seed(unit_env, with_delivery=False)
        use_case = await unit_env.get(CreateInvitationUseCase)
        audit_repo = await unit_env.get(AuditRecordRepository)

        # Act
        response = await use_case.execute(
            CreateInvitationRequest(
                event_id=event.id, delivery_method=DeliveryMethod.LINK
            )
        )

        # Assert
        assert response.result == DispatchResult.CREATED
        assert response.invitation.is_active is True
        assert response.invitation.join_link == (
            f"http://localhost:5173/join/{response.invitation.token}"
        )
        assert await audit_repo.find_by_event(event.id) == []

    @pytest.mark.asyncio
    async def test_unknown_event(self, unit_env):
        use_case = await unit_env.get(CreateInvitationUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateInvitationRequest(
                    event_id=uuid4(), delivery_method=DeliveryMethod.LINK
                )
            )


class TestBoundaryRejections:
    """Rejections before any token or audit record exists."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("recipient", [None, "", "   "])
    async def test_email_requires_recipient(self, unit_env, recipient):
        event = await seed(unit_env)
        use_case = await unit_env.get(CreateInvitationUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        audit_repo = await unit_env.get(AuditRecordRepository)

        with pytest.raises(InvalidDispatchRequestError):
            await use_case.execute(email_request(event, recipient=recipient))

        assert await invitation_repo.find_by_event(event.id) == []
        assert await audit_repo.find_by_event(event.id) == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "recipient",
        [
            "a@example.org, b@example.org",
            "a@example.org; b@example.org",
            "not-an-address",
            "x" * 320 + "@example.org",
        ],
    )
    async def test_email_rejects_anything_but_one_address(self, unit_env, recipient):
        event = await seed(unit_env)
        use_case = await unit_env.get(CreateInvitationUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        audit_repo = await unit_env.get(AuditRecordRepository)
        sender = await unit_env.get(EmailSender)

        with pytest.raises(InvalidDispatchRequestError):
            await use_case.execute(email_request(event, recipient=recipient))

        assert await invitation_repo.find_by_event(event.id) == []
        assert await audit_repo.find_by_event(event.id) == []
        assert sender.sent == []

    @pytest.mark.asyncio
    async def test_over_long_recipient_rejected_before_quota_denial(self, unit_env):
        event = await seed(unit_env)
        quota_service = AsyncMock(spec=QuotaService)
        quota_service.check.return_value = DENIED
        use_case = await build_use_case(unit_env, quota_service=quota_service)
        audit_repo = await unit_env.get(AuditRecordRepository)

        with pytest.raises(InvalidDispatchRequestError):
            await use_case.execute(
                email_request(event, recipient="x" * 320 + "@example.org")
            )

        quota_service.check.assert_not_called()
        assert await audit_repo.find_by_event(event.id) == []

    @pytest.mark.asyncio
    async def test_recipient_is_trimmed(self, unit_env):
        event = await seed(unit_env)
        use_case = await unit_env.get(CreateInvitationUseCase)
        sender = await unit_env.get(EmailSender)

        response = await use_case.execute(
            email_request(event, recipient="  player@example.org \n")
        )

        assert response.result == DispatchResult.SENT
        assert response.invitation.recipient == "player@example.org"
        assert [m.recipient for m in sender.sent] == ["player@example.org"]

    @pytest.mark.asyncio
    async def test_email_rejected_when_mail_not_configured(self, unit_env):
        event = await seed(unit_env, with_delivery=False)
        use_case = await unit_env.get(CreateInvitationUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        audit_repo = await unit_env.get(AuditRecordRepository)

        with pytest.raises(DeliveryDisabledError):
            await use_case.execute(email_request(event))

        assert await invitation_repo.find_by_event(event.id) == []
        assert await audit_repo.find_by_event(event.id) == []


class TestEmailDispatch:
    """EMAIL invitations through quota and transport."""

    @pytest.mark.asyncio
    async def test_email_sent(self, unit_env):
        # Arrange
        event = await seed(unit_env)
        use_case = await unit_env.get(CreateInvitationUseCase)
        audit_repo = await unit_env.get(AuditRecordRepository)
        sender = await unit_env.get(EmailSender)
        operator_id = uuid4()

        # Act
        response = await use_case.execute(email_request(event, operator_id))

        # Assert
        assert response.result == DispatchResult.SENT
        assert len(sender.sent) == 1
        message = sender.sent[0]
        assert message.recipient == "player@example.org"
        assert message.sender == "Cache Hunt <hunt@example.org>"
        assert message.subject == "Invitation: Spring Hunt"
        assert response.invitation.join_link in message.body

        records = await audit_repo.find_by_event(event.id)
        assert len(records) == 1
        assert records[0].outcome == DispatchOutcome.SENT
        assert records[0].invitation_id == response.invitation.invitation_id
        assert records[0].operator_id == operator_id
        assert records[0].error_message is None

    @pytest.mark.asyncio
    async def test_third_email_within_hour_is_rate_limited(self, unit_env):
        """Ceilings 2/hour and 10/day: the third send in an hour is refused."""
        # Arrange
        event = await seed(unit_env)
        use_case = await unit_env.get(CreateInvitationUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        audit_repo = await unit_env.get(AuditRecordRepository)
        sender = await unit_env.get(EmailSender)
        operator_id = uuid4()

        # Act
        first = await use_case.execute(email_request(event, operator_id))
        second = await use_case.execute(email_request(event, operator_id))
        third = await use_case.execute(email_request(event, operator_id))

        # Assert
        assert first.result == DispatchResult.SENT
        assert second.result == DispatchResult.SENT
        assert third.result == DispatchResult.RATE_LIMITED
        assert "2" in third.message
        assert third.invitation is None
        assert third.retry_after_seconds is not None
        assert len(sender.sent) == 2
        assert len(await invitation_repo.find_by_event(event.id)) == 2

        outcomes = sorted(r.outcome.value for r in await audit_repo.find_by_event(event.id))
        assert outcomes == ["RATE_LIMITED", "SENT", "SENT"]

    @pytest.mark.asyncio
    async def test_pre_quota_denial_records_without_invitation(self, unit_env):
        event = await seed(unit_env, max_emails_per_hour_per_operator=1)
        use_case = await unit_env.get(CreateInvitationUseCase)
        audit_repo = await unit_env.get(AuditRecordRepository)
        operator_id = uuid4()
        await use_case.execute(email_request(event, operator_id))

        response = await use_case.execute(email_request(event, operator_id))

        assert response.result == DispatchResult.RATE_LIMITED
        limited = await audit_repo.find_by_event(
            event.id, DispatchOutcome.RATE_LIMITED
        )
        assert len(limited) == 1
        assert limited[0].invitation_id is None
        assert limited[0].operator_id == operator_id
        assert limited[0].subject == "Invitation: Spring Hunt"
        assert limited[0].error_message == "Limit reached (1 per hour)."

    @pytest.mark.asyncio
    async def test_email_without_operator_is_not_metered(self, unit_env):
        event = await seed(unit_env, max_emails_per_hour_per_operator=1)
        use_case = await unit_env.get(CreateInvitationUseCase)

        for _ in range(3):
            response = await use_case.execute(
                CreateInvitationRequest(
                    event_id=event.id,
                    delivery_method=DeliveryMethod.EMAIL,
                    recipient="player@example.org",
                )
            )
            assert response.result == DispatchResult.SENT

    @pytest.mark.asyncio
    async def test_transport_failure_keeps_invitation(self, unit_env):
        # Arrange
        event = await seed(unit_env)
        use_case = await unit_env.get(CreateInvitationUseCase)
        invitation_repo = await unit_env.get(InvitationRepository)
        audit_repo = await unit_env.get(AuditRecordRepository)
        sender = await unit_env.get(EmailSender)
        sender.fail_with = DeliveryError("Mail server unreachable")

        # Act
        response = await use_case.execute(email_request(event))

        # Assert
        assert response.result == DispatchResult.FAILED
        assert "Mail server unreachable" in response.message
        invitation = await invitation_repo.find_by_id(
            response.invitation.invitation_id
        )
        assert invitation is not None
        assert invitation.is_active is True

        records = await audit_repo.find_by_event(event.id)
        assert [r.outcome for r in records] == [DispatchOutcome.FAILED]
        assert records[0].error_message == "Mail server unreachable"
        assert records[0].invitation_id == invitation.id


class TestMidFlightChanges:
    """Settings or quota changing between the boundary and the send."""

    @pytest.mark.asyncio
    async def test_mail_disabled_mid_flight(self, unit_env):
        # Arrange
        event = await seed(unit_env)
        settings_service = AsyncMock(spec=DeliverySettingsService)
        settings_service.current.side_effect = [ENABLED, DISABLED]
        use_case = await build_use_case(
            unit_env, delivery_settings_service=settings_service
        )
        invitation_repo = await unit_env.get(InvitationRepository)
        audit_repo = await unit_env.get(AuditRecordRepository)
        sender = await unit_env.get(EmailSender)

        # Act
        response = await use_case.execute(email_request(event))

        # Assert
        assert response.result == DispatchResult.DISABLED
        assert sender.sent == []
        invitation = await invitation_repo.find_by_id(
            response.invitation.invitation_id
        )
        assert invitation is not None

        records = await audit_repo.find_by_event(event.id)
        assert [r.outcome for r in records] == [DispatchOutcome.DISABLED]
        assert records[0].error_message == "Email delivery is not configured"
        assert records[0].invitation_id == invitation.id

    @pytest.mark.asyncio
    async def test_authoritative_recheck_discards_invitation(self, unit_env):
        """A concurrent send used up the quota after the first check."""
        # Arrange
        event = await seed(unit_env)
        quota_service = AsyncMock(spec=QuotaService)
        quota_service.check.side_effect = [QuotaDecision.allow(), DENIED]
        use_case = await build_use_case(unit_env, quota_service=quota_service)
        invitation_repo = await unit_env.get(InvitationRepository)
        audit_repo = await unit_env.get(AuditRecordRepository)
        sender = await unit_env.get(EmailSender)

        # Act
        response = await use_case.execute(email_request(event))

        # Assert
        assert response.result == DispatchResult.RATE_LIMITED
        assert response.retry_after_seconds == 120
        assert sender.sent == []
        assert await invitation_repo.find_by_event(event.id) == []

        records = await audit_repo.find_by_event(event.id)
        assert [r.outcome for r in records] == [DispatchOutcome.RATE_LIMITED]
        assert records[0].invitation_id is None

    @pytest.mark.asyncio
    async def test_discard_runs_when_audit_write_fails(self, unit_env):
        # Arrange
        event = await seed(unit_env)
        quota_service = AsyncMock(spec=QuotaService)
        quota_service.check.side_effect = [QuotaDecision.allow(), DENIED]
        audit_service = AsyncMock(spec=AuditService)
        audit_service.record.side_effect = RuntimeError("database unavailable")
        use_case = await build_use_case(
            unit_env, quota_service=quota_service, audit_service=audit_service
        )
        invitation_repo = await unit_env.get(InvitationRepository)

        # Act
        with pytest.raises(RuntimeError):
            await use_case.execute(email_request(event))

        # Assert
        assert await invitation_repo.find_by_event(event.id) == []
