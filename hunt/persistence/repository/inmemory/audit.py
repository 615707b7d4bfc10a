"""In-memory audit record repository for testing."""

from datetime import datetime

from hunt.domain.model.audit import AuditRecord
from hunt.domain.repository.audit import AuditRecordRepository
from hunt.domain.value import DispatchOutcome, EventId, OperatorId

from .database import InMemoryDatabase


class InMemoryAuditRecordRepository(AuditRecordRepository):
    """In-memory implementation of AuditRecordRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def append(self, record: AuditRecord) -> AuditRecord:
        """Append an audit record."""
        self._db.audit_records.append(record)
        return record

    def _quota_consuming(
        self, operator_id: OperatorId, since: datetime
    ) -> list[AuditRecord]:
        return [
            record
            for record in self._db.audit_records
            if record.operator_id == operator_id
            and record.created_at >= since
            and record.outcome.consumes_quota
        ]

    async def count_quota_consuming_since(
        self, operator_id: OperatorId, since: datetime
    ) -> int:
        """Count an operator's quota-consuming records since a point in time."""
        return len(self._quota_consuming(operator_id, since))

    async def quota_consuming_timestamps_since(
        self, operator_id: OperatorId, since: datetime
    ) -> list[datetime]:
        """Creation times of quota-consuming records, oldest first."""
        return sorted(
            record.created_at for record in self._quota_consuming(operator_id, since)
        )

    async def find_by_event(
        self,
        event_id: EventId,
        outcome: DispatchOutcome | None = None,
        limit: int = 100,
    ) -> list[AuditRecord]:
        """Find an event's audit records, newest first."""
        matches = [
            record
            for record in self._db.audit_records
            if record.event_id == event_id
            and (outcome is None or record.outcome == outcome)
        ]
        matches.sort(key=lambda record: record.created_at, reverse=True)
        return matches[:limit]
