"""Audit domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from hunt.domain.model.audit import AuditRecord
from hunt.domain.repository import AuditRecordRepository
from hunt.domain.value import (
    AuditRecordId,
    DispatchOutcome,
    EventId,
    InvitationId,
    OperatorId,
)

from .base import Service

AUDIT_PAGE_SIZE = 100


class AuditService(Service):
    """Domain service for the dispatch audit trail."""

    def __init__(self, audit_repository: AuditRecordRepository) -> None:
        """Initialize audit service.

        Args:
            audit_repository: Audit record repository
        """
        self.audit_repository = audit_repository

    async def record(
        self,
        recipient: str,
        subject: str,
        outcome: DispatchOutcome,
        event_id: EventId | None = None,
        invitation_id: InvitationId | None = None,
        operator_id: OperatorId | None = None,
        error_message: str | None = None,
    ) -> AuditRecord:
        """Append the outcome of one dispatch attempt.

        Args:
            recipient: Recipient address
            subject: Rendered subject
            outcome: Dispatch outcome
            event_id: Event the dispatch was for
            invitation_id: Invitation, if one exists
            operator_id: Operator who triggered the dispatch
            error_message: Short, non-sensitive error description

        Returns:
            Stored audit record
        """
        record = AuditRecord(
            id=AuditRecordId(uuid4()),
            recipient=recipient,
            subject=subject,
            outcome=outcome,
            error_message=error_message,
            created_at=datetime.now(timezone.utc),
            event_id=event_id,
            invitation_id=invitation_id,
            operator_id=operator_id,
        )
        saved = await self.audit_repository.append(record)
        logfire.info(
            "Dispatch recorded",
            audit_record_id=str(saved.id),
            outcome=outcome.value,
            event_id=str(event_id) if event_id else None,
            operator_id=str(operator_id) if operator_id else None,
        )
        return saved

    async def list_for_event(
        self,
        event_id: EventId,
        outcome: DispatchOutcome | None = None,
        limit: int = AUDIT_PAGE_SIZE,
    ) -> list[AuditRecord]:
        """List an event's audit records, newest first.

        Args:
            event_id: Event ID
            outcome: Optional outcome filter
            limit: Page size

        Returns:
            List of audit records
        """
        with logfire.span(
            "audit_service.list_for_event",
            event_id=str(event_id),
            outcome=outcome.value if outcome else None,
        ):
            return await self.audit_repository.find_by_event(event_id, outcome, limit)
