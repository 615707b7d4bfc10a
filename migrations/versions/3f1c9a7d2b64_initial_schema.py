"""initial_schema

Create the schema for invitation dispatch:
- Events (read and deleted by the dispatch engine)
- Invitations (revocable join tokens, LINK or EMAIL)
- Audit records (append-only dispatch log, source of truth for quotas)
- System settings (single row of delivery overrides)

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-18 09:12:44.310528

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE delivery_method AS ENUM ('LINK', 'EMAIL');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE dispatch_outcome AS ENUM (
                'SENT', 'FAILED', 'DISABLED', 'RATE_LIMITED'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # EVENTS table
    # ========================================================================
    op.create_table(
        "events",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("starts_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("ends_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("sender_email", sa.String(255), nullable=True),
        sa.Column("sender_name", sa.String(255), nullable=True),
        sa.Column("invitation_email_subject", sa.Text(), nullable=True),
        sa.Column("invitation_email_body", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    # Retention cleanup scans by end time
    op.create_index("idx_events_ends_at", "events", ["ends_at"])

    # ========================================================================
    # INVITATIONS table
    # ========================================================================
    op.create_table(
        "invitations",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("token", sa.String(255), nullable=False, unique=True),
        sa.Column(
            "delivery_method",
            postgresql.ENUM(
                "LINK", "EMAIL", name="delivery_method", create_type=False
            ),
            nullable=False,
        ),
        sa.Column("recipient", sa.String(320), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deactivated_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("used_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # deactivated_at is set exactly when the invitation is inactive
        sa.CheckConstraint(
            "(is_active AND deactivated_at IS NULL) "
            "OR (NOT is_active AND deactivated_at IS NOT NULL)",
            name="ck_invitations_deactivated_at",
        ),
        sa.CheckConstraint(
            "delivery_method <> 'EMAIL' OR (recipient IS NOT NULL AND recipient <> '')",
            name="ck_invitations_email_recipient",
        ),
    )
    op.create_index("idx_invitations_event_id", "invitations", ["event_id"])

    # ========================================================================
    # AUDIT_RECORDS table
    # ========================================================================
    op.create_table(
        "audit_records",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("recipient", sa.String(320), nullable=False),
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column(
            "outcome",
            postgresql.ENUM(
                "SENT",
                "FAILED",
                "DISABLED",
                "RATE_LIMITED",
                name="dispatch_outcome",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("error_message", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("event_id", sa.UUID(), nullable=True),
        sa.Column("invitation_id", sa.UUID(), nullable=True),
        sa.Column("operator_id", sa.UUID(), nullable=True),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["invitation_id"], ["invitations.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # Critical index for quota checks - runs twice per email dispatch
    op.create_index(
        "idx_audit_records_operator_created",
        "audit_records",
        ["operator_id", "created_at"],
    )
    op.create_index(
        "idx_audit_records_event_created",
        "audit_records",
        ["event_id", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_audit_records_invitation_id", "audit_records", ["invitation_id"]
    )

    # ========================================================================
    # SYSTEM_SETTINGS table (single row)
    # ========================================================================
    op.create_table(
        "system_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("smtp_host", sa.String(255), nullable=True),
        sa.Column("smtp_port", sa.Integer(), nullable=True),
        sa.Column("smtp_user", sa.String(255), nullable=True),
        sa.Column("smtp_password", sa.String(255), nullable=True),
        sa.Column("smtp_use_tls", sa.Boolean(), nullable=True),
        sa.Column("smtp_from_address", sa.String(255), nullable=True),
        sa.Column("smtp_from_name", sa.String(255), nullable=True),
        sa.Column("max_emails_per_hour_per_operator", sa.Integer(), nullable=True),
        sa.Column("max_emails_per_day_per_operator", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("id = 1", name="ck_system_settings_single_row"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("system_settings")

    op.drop_index("idx_audit_records_invitation_id", table_name="audit_records")
    op.drop_index("idx_audit_records_event_created", table_name="audit_records")
    op.drop_index("idx_audit_records_operator_created", table_name="audit_records")
    op.drop_table("audit_records")

    op.drop_index("idx_invitations_event_id", table_name="invitations")
    op.drop_table("invitations")

    op.drop_index("idx_events_ends_at", table_name="events")
    op.drop_table("events")

    op.execute("DROP TYPE IF EXISTS dispatch_outcome")
    op.execute("DROP TYPE IF EXISTS delivery_method")
