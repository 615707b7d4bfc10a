"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from hunt.domain.model import AuditRecord, DeliverySettings, Event, Invitation
from hunt.domain.value import (
    AuditRecordId,
    DeliveryMethod,
    DispatchOutcome,
    EventId,
    InvitationId,
    InviteToken,
    OperatorId,
)


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model.

    Args:
        row: Database row as dict

    Returns:
        Event domain model
    """
    return Event(
        id=EventId(_uuid(row["id"])),
        name=row["name"],
        description=row.get("description"),
        starts_at=row["starts_at"],
        ends_at=row["ends_at"],
        sender_email=row.get("sender_email"),
        sender_name=row.get("sender_name"),
        invitation_email_subject=row.get("invitation_email_subject"),
        invitation_email_body=row.get("invitation_email_body"),
        created_at=row["created_at"],
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict."""
    return event.model_dump()


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model.

    Args:
        row: Database row as dict

    Returns:
        Invitation domain model
    """
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        event_id=EventId(_uuid(row["event_id"])),
        token=InviteToken(row["token"]),
        delivery_method=DeliveryMethod(row["delivery_method"]),
        recipient=row.get("recipient"),
        is_active=row["is_active"],
        created_at=row["created_at"],
        deactivated_at=row.get("deactivated_at"),
        used_at=row.get("used_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict.

    Extracts the primitive token and enum values for insertion.
    """
    data = invitation.model_dump()
    data["delivery_method"] = invitation.delivery_method.value
    return data


def row_to_audit_record(row: Dict[str, Any]) -> AuditRecord:
    """Convert database row to AuditRecord domain model."""
    event_id = _uuid(row.get("event_id"))
    invitation_id = _uuid(row.get("invitation_id"))
    operator_id = _uuid(row.get("operator_id"))
    return AuditRecord(
        id=AuditRecordId(_uuid(row["id"])),
        recipient=row["recipient"],
        subject=row["subject"],
        outcome=DispatchOutcome(row["outcome"]),
        error_message=row.get("error_message"),
        created_at=row["created_at"],
        event_id=EventId(event_id) if event_id else None,
        invitation_id=InvitationId(invitation_id) if invitation_id else None,
        operator_id=OperatorId(operator_id) if operator_id else None,
    )


def audit_record_to_dict(record: AuditRecord) -> Dict[str, Any]:
    """Convert AuditRecord domain model to database dict."""
    data = record.model_dump()
    data["outcome"] = record.outcome.value
    return data


def row_to_delivery_settings(row: Dict[str, Any]) -> DeliverySettings:
    """Convert the system settings row to DeliverySettings."""
    fields = DeliverySettings.model_fields.keys()
    return DeliverySettings(**{name: row.get(name) for name in fields})


def delivery_settings_to_dict(settings: DeliverySettings) -> Dict[str, Any]:
    """Convert DeliverySettings to the system settings row."""
    return settings.model_dump()
