"""Unit tests for the in-memory repositories shared store."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from hunt.domain.model import AuditRecord, Invitation
from hunt.domain.value import (
    AuditRecordId,
    DeliveryMethod,
    DispatchOutcome,
    EventId,
    InvitationId,
    InviteToken,
    OperatorId,
)
from hunt.persistence.repository.inmemory import (
    InMemoryAuditRecordRepository,
    InMemoryDatabase,
    InMemoryInvitationRepository,
)


def make_invitation(token: str = "a" * 48) -> Invitation:
    return Invitation(
        id=InvitationId(uuid4()),
        event_id=EventId(uuid4()),
        token=InviteToken(root=token),
        delivery_method=DeliveryMethod.LINK,
    )


class TestInMemoryInvitationRepository:
    """Unit tests for InMemoryInvitationRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_token_rejected(self):
        repo = InMemoryInvitationRepository()
        await repo.save(make_invitation())

        with pytest.raises(IntegrityError):
            await repo.save(make_invitation())

    @pytest.mark.asyncio
    async def test_update_keeps_token(self):
        repo = InMemoryInvitationRepository()
        invitation = await repo.save(make_invitation())

        await repo.save(invitation.deactivated(datetime.now(timezone.utc)))

        stored = await repo.find_by_token(invitation.token)
        assert stored.is_active is False

    @pytest.mark.asyncio
    async def test_delete_detaches_audit_records(self):
        """Audit records outlive a discarded invitation."""
        # Arrange
        database = InMemoryDatabase()
        invitation_repo = InMemoryInvitationRepository(database)
        audit_repo = InMemoryAuditRecordRepository(database)
        invitation = await invitation_repo.save(make_invitation())
        await audit_repo.append(
            AuditRecord(
                id=AuditRecordId(uuid4()),
                recipient="player@example.org",
                subject="Invitation: Spring Hunt",
                outcome=DispatchOutcome.FAILED,
                event_id=invitation.event_id,
                invitation_id=invitation.id,
            )
        )

        # Act
        await invitation_repo.delete(invitation.id)

        # Assert
        assert await invitation_repo.find_by_id(invitation.id) is None
        assert len(database.audit_records) == 1
        assert database.audit_records[0].invitation_id is None


class TestInMemoryAuditRecordRepository:
    """Unit tests for InMemoryAuditRecordRepository quota queries."""

    @pytest.mark.asyncio
    async def test_rate_limited_records_do_not_count(self):
        repo = InMemoryAuditRecordRepository()
        operator_id = OperatorId(uuid4())
        now = datetime.now(timezone.utc)
        for outcome in DispatchOutcome:
            await repo.append(
                AuditRecord(
                    id=AuditRecordId(uuid4()),
                    recipient="player@example.org",
                    subject="Invitation",
                    outcome=outcome,
                    created_at=now,
                    operator_id=operator_id,
                )
            )

        count = await repo.count_quota_consuming_since(
            operator_id, now - timedelta(hours=1)
        )

        assert count == 3

    @pytest.mark.asyncio
    async def test_window_and_operator_are_respected(self):
        repo = InMemoryAuditRecordRepository()
        operator_id = OperatorId(uuid4())
        now = datetime.now(timezone.utc)
        for created_at, owner in [
            (now - timedelta(hours=2), operator_id),
            (now - timedelta(minutes=5), operator_id),
            (now - timedelta(minutes=5), OperatorId(uuid4())),
        ]:
            await repo.append(
                AuditRecord(
                    id=AuditRecordId(uuid4()),
                    recipient="player@example.org",
                    subject="Invitation",
                    outcome=DispatchOutcome.SENT,
                    created_at=created_at,
                    operator_id=owner,
                )
            )

        timestamps = await repo.quota_consuming_timestamps_since(
            operator_id, now - timedelta(hours=1)
        )

        assert timestamps == [now - timedelta(minutes=5)]
