"""Integration tests for the PostgreSQL repositories.

These tests need a migrated database at HUNT_TEST_DATABASE_URL and are
skipped otherwise.
"""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from hunt.domain.model import AuditRecord, Invitation
from hunt.domain.repository import (
    AuditRecordRepository,
    DeliverySettingsRepository,
    EventRepository,
    InvitationRepository,
)
from hunt.domain.value import (
    AuditRecordId,
    DeliveryMethod,
    DispatchOutcome,
    InvitationId,
    InviteToken,
    OperatorId,
)
from tests.conftest import make_delivery_settings, make_event
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("HUNT_TEST_DATABASE_URL"),
    reason="HUNT_TEST_DATABASE_URL not set",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def new_invitation(event_id, **overrides) -> Invitation:
    fields = {
        "id": InvitationId(uuid4()),
        "event_id": event_id,
        "token": InviteToken(root=uuid4().hex + uuid4().hex[:16]),
        "delivery_method": DeliveryMethod.EMAIL,
        "recipient": "player@example.org",
    }
    fields.update(overrides)
    return Invitation(**fields)


def new_record(outcome: DispatchOutcome, **overrides) -> AuditRecord:
    fields = {
        "id": AuditRecordId(uuid4()),
        "recipient": "player@example.org",
        "subject": "Invitation: Spring Hunt",
        "outcome": outcome,
    }
    fields.update(overrides)
    return AuditRecord(**fields)


class TestInvitationRepositoryIntegration:
    """Integration tests for PostgresInvitationRepository."""

    @pytest.mark.asyncio
    async def test_round_trip_by_token(self, integration_env):
        """find_by_token must query with the token's string value."""
        event = await (await integration_env.get(EventRepository)).save(make_event())
        invitation_repo = await integration_env.get(InvitationRepository)
        invitation = await invitation_repo.save(new_invitation(event.id))

        found = await invitation_repo.find_by_token(invitation.token)

        assert found is not None
        assert found.id == invitation.id
        assert found.delivery_method == DeliveryMethod.EMAIL
        assert await invitation_repo.exists_token(invitation.token)

    @pytest.mark.asyncio
    async def test_deactivation_persists(self, integration_env):
        event = await (await integration_env.get(EventRepository)).save(make_event())
        invitation_repo = await integration_env.get(InvitationRepository)
        invitation = await invitation_repo.save(new_invitation(event.id))

        await invitation_repo.save(invitation.deactivated(datetime.now(timezone.utc)))

        found = await invitation_repo.find_by_id(invitation.id)
        assert found.is_active is False
        assert found.deactivated_at is not None


class TestAuditRecordRepositoryIntegration:
    """Integration tests for PostgresAuditRecordRepository."""

    @pytest.mark.asyncio
    async def test_quota_counts_skip_rate_limited(self, integration_env):
        event = await (await integration_env.get(EventRepository)).save(make_event())
        audit_repo = await integration_env.get(AuditRecordRepository)
        operator_id = OperatorId(uuid4())
        for outcome in DispatchOutcome:
            await audit_repo.append(
                new_record(outcome, event_id=event.id, operator_id=operator_id)
            )

        since = datetime.now(timezone.utc) - timedelta(hours=1)
        count = await audit_repo.count_quota_consuming_since(operator_id, since)
        timestamps = await audit_repo.quota_consuming_timestamps_since(
            operator_id, since
        )

        assert count == 3
        assert timestamps == sorted(timestamps)

    @pytest.mark.asyncio
    async def test_find_by_event_filters_by_outcome(self, integration_env):
        event = await (await integration_env.get(EventRepository)).save(make_event())
        audit_repo = await integration_env.get(AuditRecordRepository)
        await audit_repo.append(new_record(DispatchOutcome.SENT, event_id=event.id))
        await audit_repo.append(new_record(DispatchOutcome.FAILED, event_id=event.id))

        failed = await audit_repo.find_by_event(event.id, DispatchOutcome.FAILED)

        assert [r.outcome for r in failed] == [DispatchOutcome.FAILED]


class TestEventRepositoryIntegration:
    """Integration tests for PostgresEventRepository."""

    @pytest.mark.asyncio
    async def test_delete_cascade(self, integration_env):
        # Arrange
        event_repo = await integration_env.get(EventRepository)
        invitation_repo = await integration_env.get(InvitationRepository)
        audit_repo = await integration_env.get(AuditRecordRepository)
        event = await event_repo.save(make_event())
        invitation = await invitation_repo.save(new_invitation(event.id))
        await audit_repo.append(
            new_record(
                DispatchOutcome.SENT, event_id=event.id, invitation_id=invitation.id
            )
        )

        # Act
        deleted = await event_repo.delete_cascade(event.id)

        # Assert
        assert deleted is True
        assert await event_repo.find_by_id(event.id) is None
        assert await invitation_repo.find_by_id(invitation.id) is None
        assert await audit_repo.find_by_event(event.id) == []

    @pytest.mark.asyncio
    async def test_delete_cascade_unknown_event(self, integration_env):
        event_repo = await integration_env.get(EventRepository)

        assert await event_repo.delete_cascade(make_event().id) is False


class TestDeliverySettingsRepositoryIntegration:
    """Integration tests for PostgresDeliverySettingsRepository."""

    @pytest.mark.asyncio
    async def test_upsert_single_row(self, integration_env):
        repo = await integration_env.get(DeliverySettingsRepository)

        await repo.save(make_delivery_settings())
        await repo.save(make_delivery_settings(max_emails_per_hour_per_operator=5))

        stored = await repo.get()
        assert stored.max_emails_per_hour_per_operator == 5
        assert stored.smtp_host == "smtp.example.org"
