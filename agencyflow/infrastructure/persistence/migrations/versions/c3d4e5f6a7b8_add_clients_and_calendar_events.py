"""add client and calendar_event; work_item.client_id references client

Revision ID: c3d4e5f6a7b8
Revises: b2c3d4e5f6a7
Create Date: 2026-10-19

Both new tables get the same tenant_isolation policy as the others. Existing
work_item.client_id values that match no client are cleared before the foreign
key is added.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "c3d4e5f6a7b8"
down_revision: Union[str, Sequence[str], None] = "b2c3d4e5f6a7"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

NEW_TENANT_SCOPED_TABLES = ["client", "calendar_event"]

_CURRENT_TENANT = "current_setting('app.current_tenant_id', true)"


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "client",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("client_name", sa.String(length=255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("type", sa.String(length=64), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="active"),
        sa.Column("phase", sa.String(length=64), nullable=True),
        sa.Column("progress", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("budget", sa.Numeric(12, 2), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("deadline", sa.Date(), nullable=True),
        sa.Column(
            "team",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("created_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenant.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by"], ["user_profile.id"], ondelete="SET NULL"),
        sa.CheckConstraint(
            "status IN ('active', 'paused', 'completed', 'delayed')",
            name="client_status_check",
        ),
        sa.CheckConstraint("progress BETWEEN 0 AND 100", name="client_progress_check"),
    )
    op.create_index("ix_client_tenant_id", "client", ["tenant_id"], unique=False)
    op.create_index(
        "ix_client_tenant_created", "client", ["tenant_id", "created_at"], unique=False
    )

    op.create_table(
        "calendar_event",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("client_id", sa.String(), nullable=False),
        sa.Column("area", sa.String(length=32), nullable=False),
        sa.Column("concept", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column(
            "assigned_user_ids",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("created_by", sa.String(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenant.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["client_id"], ["client.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["created_by"], ["user_profile.id"], ondelete="SET NULL"),
        sa.CheckConstraint(
            "area IN ('marketing', 'branding', 'community')",
            name="calendar_event_area_check",
        ),
        sa.CheckConstraint("end_time > start_time", name="calendar_event_time_check"),
    )
    op.create_index(
        "ix_calendar_event_tenant_id", "calendar_event", ["tenant_id"], unique=False
    )
    op.create_index(
        "ix_calendar_event_client_area",
        "calendar_event",
        ["tenant_id", "client_id", "area", "day"],
        unique=False,
    )

    op.execute(
        "UPDATE work_item SET client_id = NULL "
        "WHERE client_id IS NOT NULL "
        "AND client_id NOT IN (SELECT id FROM client)"
    )
    op.create_foreign_key(
        "work_item_client_id_fkey",
        "work_item",
        "client",
        ["client_id"],
        ["id"],
        ondelete="SET NULL",
    )

    for table in NEW_TENANT_SCOPED_TABLES:
        op.execute(f"ALTER TABLE {table} ENABLE ROW LEVEL SECURITY")
        op.execute(
            f"CREATE POLICY tenant_isolation ON {table} "
            f"USING (tenant_id = {_CURRENT_TENANT}) "
            f"WITH CHECK (tenant_id = {_CURRENT_TENANT})"
        )


def downgrade() -> None:
    for table in reversed(NEW_TENANT_SCOPED_TABLES):
        op.execute(f"DROP POLICY IF EXISTS tenant_isolation ON {table}")
        op.execute(f"ALTER TABLE {table} DISABLE ROW LEVEL SECURITY")
    op.drop_constraint("work_item_client_id_fkey", "work_item", type_="foreignkey")
    op.drop_table("calendar_event")
    op.drop_table("client")
