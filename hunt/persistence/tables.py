"""SQLAlchemy table definitions.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# EVENTS TABLE (owned by event management; read and deleted by the engine)
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("starts_at", TIMESTAMP(timezone=True), nullable=False),
    Column("ends_at", TIMESTAMP(timezone=True), nullable=False),
    Column("sender_email", String(255), nullable=True),
    Column("sender_name", String(255), nullable=True),
    Column("invitation_email_subject", Text, nullable=True),
    Column("invitation_email_body", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_events_ends_at", events_table.c.ends_at)

# ============================================================================
# INVITATIONS TABLE
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "event_id",
        UUID(as_uuid=True),
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("token", String(255), nullable=False, unique=True),
    Column(
        "delivery_method",
        Enum("LINK", "EMAIL", name="delivery_method", create_type=False),
        nullable=False,
    ),
    Column("recipient", String(320), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deactivated_at", TIMESTAMP(timezone=True), nullable=True),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "(is_active AND deactivated_at IS NULL) "
        "OR (NOT is_active AND deactivated_at IS NOT NULL)",
        name="ck_invitations_deactivated_at",
    ),
    CheckConstraint(
        "delivery_method <> 'EMAIL' OR (recipient IS NOT NULL AND recipient <> '')",
        name="ck_invitations_email_recipient",
    ),
)

Index("idx_invitations_event_id", invitations_table.c.event_id)

# ============================================================================
# AUDIT RECORDS TABLE (append-only; source of truth for quotas)
# ============================================================================
audit_records_table = Table(
    "audit_records",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("recipient", String(320), nullable=False),
    Column("subject", Text, nullable=False),
    Column(
        "outcome",
        Enum(
            "SENT",
            "FAILED",
            "DISABLED",
            "RATE_LIMITED",
            name="dispatch_outcome",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("error_message", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "event_id",
        UUID(as_uuid=True),
        ForeignKey("events.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "invitation_id",
        UUID(as_uuid=True),
        ForeignKey("invitations.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("operator_id", UUID(as_uuid=True), nullable=True),
)

# Quota windows: count by operator over a time range
Index(
    "idx_audit_records_operator_created",
    audit_records_table.c.operator_id,
    audit_records_table.c.created_at,
)
Index(
    "idx_audit_records_event_created",
    audit_records_table.c.event_id,
    audit_records_table.c.created_at,
)
Index("idx_audit_records_invitation_id", audit_records_table.c.invitation_id)

# ============================================================================
# SYSTEM SETTINGS TABLE (single row, id = 1)
# ============================================================================
system_settings_table = Table(
    "system_settings",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("smtp_host", String(255), nullable=True),
    Column("smtp_port", Integer, nullable=True),
    Column("smtp_user", String(255), nullable=True),
    Column("smtp_password", String(255), nullable=True),
    Column("smtp_use_tls", Boolean, nullable=True),
    Column("smtp_from_address", String(255), nullable=True),
    Column("smtp_from_name", String(255), nullable=True),
    Column("max_emails_per_hour_per_operator", Integer, nullable=True),
    Column("max_emails_per_day_per_operator", Integer, nullable=True),
    CheckConstraint("id = 1", name="ck_system_settings_single_row"),
)
