"""PostgreSQL implementation of AuditRecord repository."""

from datetime import datetime

from sqlalchemy import and_, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from hunt.domain.model import AuditRecord
from hunt.domain.repository import AuditRecordRepository
from hunt.domain.value import DispatchOutcome, EventId, OperatorId
from hunt.persistence.mappers import audit_record_to_dict, row_to_audit_record
from hunt.persistence.tables import audit_records_table


def _quota_consuming(operator_id: OperatorId, since: datetime):
    return and_(
        audit_records_table.c.operator_id == operator_id,
        audit_records_table.c.created_at >= since,
        audit_records_table.c.outcome != DispatchOutcome.RATE_LIMITED.value,
    )


class PostgresAuditRecordRepository(AuditRecordRepository):
    """PostgreSQL implementation of AuditRecordRepository.

    Records are only ever inserted; there is no update path.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, record: AuditRecord) -> AuditRecord:
        """Insert an audit record."""
        stmt = insert(audit_records_table).values(**audit_record_to_dict(record))
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def count_quota_consuming_since(
        self, operator_id: OperatorId, since: datetime
    ) -> int:
        """Count an operator's quota-consuming records since a point in time.

        Uses index idx_audit_records_operator_created.

        Args:
            operator_id: The operator
            since: Inclusive lower bound for created_at

        Returns:
            Number of matching records
        """
        stmt = (
            select(func.count())
            .select_from(audit_records_table)
            .where(_quota_consuming(operator_id, since))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def quota_consuming_timestamps_since(
        self, operator_id: OperatorId, since: datetime
    ) -> list[datetime]:
        """Creation times of quota-consuming records, oldest first."""
        stmt = (
            select(audit_records_table.c.created_at)
            .where(_quota_consuming(operator_id, since))
            .order_by(audit_records_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by_event(
        self,
        event_id: EventId,
        outcome: DispatchOutcome | None = None,
        limit: int = 100,
    ) -> list[AuditRecord]:
        """Find an event's audit records, newest first.

        Args:
            event_id: The event
            outcome: Optional outcome filter
            limit: Maximum number of results

        Returns:
            List of audit records
        """
        stmt = (
            select(audit_records_table)
            .where(audit_records_table.c.event_id == event_id)
            .order_by(audit_records_table.c.created_at.desc())
            .limit(limit)
        )

        if outcome:
            stmt = stmt.where(audit_records_table.c.outcome == outcome.value)

        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        return [row_to_audit_record(dict(row)) for row in rows]
