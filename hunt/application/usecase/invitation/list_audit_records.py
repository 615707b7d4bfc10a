"""List audit records use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from hunt.application.usecase.base import BaseUseCase
from hunt.domain.model import AuditRecord
from hunt.domain.service import AuditService
from hunt.domain.service.audit_service import AUDIT_PAGE_SIZE
from hunt.domain.value import DispatchOutcome, EventId


class ListAuditRecordsRequest(BaseModel):
    """List audit records request.

    ``status`` only accepts the four dispatch outcomes; anything else is
    rejected by validation instead of matching every record.
    """

    event_id: UUID
    status: DispatchOutcome | None = None


class AuditRecordItem(BaseModel):
    """Audit record in response."""

    audit_record_id: UUID
    recipient: str
    subject: str
    status: DispatchOutcome
    error_message: str | None
    created_at: datetime
    invitation_id: UUID | None
    operator_id: UUID | None

    @classmethod
    def from_record(cls, record: AuditRecord) -> "AuditRecordItem":
        return cls(
            audit_record_id=record.id,
            recipient=record.recipient,
            subject=record.subject,
            status=record.outcome,
            error_message=record.error_message,
            created_at=record.created_at,
            invitation_id=record.invitation_id,
            operator_id=record.operator_id,
        )


class ListAuditRecordsResponse(BaseModel):
    """Audit records, newest first."""

    records: list[AuditRecordItem]


class ListAuditRecordsUseCase(BaseUseCase):
    """Use case for reading an event's dispatch audit trail."""

    def __init__(self, audit_service: AuditService) -> None:
        self.audit_service = audit_service

    async def execute(self, request: ListAuditRecordsRequest) -> ListAuditRecordsResponse:
        """List the most recent audit records of an event."""
        with logfire.span(
            "list_audit_records.execute",
            event_id=str(request.event_id),
            status=request.status.value if request.status else None,
        ):
            records = await self.audit_service.list_for_event(
                EventId(request.event_id), request.status, AUDIT_PAGE_SIZE
            )
            return ListAuditRecordsResponse(
                records=[AuditRecordItem.from_record(record) for record in records]
            )
