"""Audit record repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from hunt.domain.model.audit import AuditRecord
from hunt.domain.value import DispatchOutcome, EventId, OperatorId


class AuditRecordRepository(ABC):
    """Append-only repository for AuditRecord entity."""

    @abstractmethod
    async def append(self, record: AuditRecord) -> AuditRecord:
        """Insert a new audit record.

        Args:
            record: The record to insert

        Returns:
            The inserted record
        """
        pass

    @abstractmethod
    async def count_quota_consuming_since(
        self, operator_id: OperatorId, since: datetime
    ) -> int:
        """Count an operator's records that consume quota.

        RATE_LIMITED records are rejected attempts and are not counted.

        Args:
            operator_id: The operator
            since: Inclusive lower bound for created_at

        Returns:
            Number of matching records
        """
        pass

    @abstractmethod
    async def quota_consuming_timestamps_since(
        self, operator_id: OperatorId, since: datetime
    ) -> list[datetime]:
        """Creation times of an operator's quota-consuming records, oldest first.

        Args:
            operator_id: The operator
            since: Inclusive lower bound for created_at

        Returns:
            Ascending list of timestamps
        """
        pass

    @abstractmethod
    async def find_by_event(
        self,
        event_id: EventId,
        outcome: DispatchOutcome | None = None,
        limit: int = 100,
    ) -> list[AuditRecord]:
        """Find audit records of an event, newest first.

        Args:
            event_id: The event
            outcome: Optional outcome filter
            limit: Maximum number of results

        Returns:
            List of audit records
        """
        pass
