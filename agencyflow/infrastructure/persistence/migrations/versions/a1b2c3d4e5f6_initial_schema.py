"""initial schema: tenant, user_profile, work_item, task_notification

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

One work_item table serves every department (marketing, branding, community);
department is a discriminator column. Notifications reference the work item and
record its department in task_table.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


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
        "tenant",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("status", sa.String(), nullable=False, server_default="active"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('active', 'suspended', 'archived')",
            name="tenant_status_check",
        ),
    )
    op.create_index("ix_tenant_code", "tenant", ["code"], unique=True)
    op.create_index("ix_tenant_status", "tenant", ["status"], unique=False)

    op.create_table(
        "user_profile",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("role", sa.String(length=16), nullable=False, server_default="user"),
        sa.Column("avatar_url", sa.String(), nullable=True),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenant.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("tenant_id", "email", name="uq_user_profile_tenant_email"),
        sa.CheckConstraint("role IN ('admin', 'user')", name="user_profile_role_check"),
    )
    op.create_index(
        "ix_user_profile_tenant_id", "user_profile", ["tenant_id"], unique=False
    )

    op.create_table(
        "work_item",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("department", sa.String(length=32), nullable=False),
        sa.Column(
            "info_type", sa.String(length=32), nullable=False, server_default="task"
        ),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "priority", sa.String(length=16), nullable=False, server_default="medium"
        ),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("client_id", sa.String(), nullable=True),
        sa.Column("metadata", postgresql.JSONB(), nullable=True),
        sa.Column("responsible_user_id", sa.String(), nullable=False),
        sa.Column("accountable_user_id", sa.String(), nullable=True),
        sa.Column(
            "consulted_user_ids",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "informed_user_ids",
            postgresql.ARRAY(sa.String()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "status", sa.String(length=32), nullable=False, server_default="pending"
        ),
        sa.Column("completion_content", sa.Text(), nullable=True),
        sa.Column("correction_feedback", sa.Text(), nullable=True),
        sa.Column("consulted_content", sa.Text(), nullable=True),
        sa.Column("created_by", sa.String(), nullable=True),
        sa.Column("completed_by", sa.String(), nullable=True),
        sa.Column("reviewed_by", sa.String(), nullable=True),
        sa.Column("consulted_by", sa.String(), nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("correction_requested_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("consulted_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenant.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["responsible_user_id"], ["user_profile.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["accountable_user_id"], ["user_profile.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["created_by"], ["user_profile.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["completed_by"], ["user_profile.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(["reviewed_by"], ["user_profile.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["consulted_by"], ["user_profile.id"], ondelete="SET NULL"
        ),
        sa.CheckConstraint(
            "department IN ('marketing', 'branding', 'community')",
            name="work_item_department_check",
        ),
        sa.CheckConstraint(
            "info_type IN ('task', 'campaign', 'calendar_event', 'content_week', 'brand_element')",
            name="work_item_info_type_check",
        ),
        sa.CheckConstraint(
            "priority IN ('low', 'medium', 'high')", name="work_item_priority_check"
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'in_progress', 'in_review', 'completed', 'correction_needed')",
            name="work_item_status_check",
        ),
    )
    op.create_index("ix_work_item_tenant_id", "work_item", ["tenant_id"], unique=False)
    op.create_index("ix_work_item_client_id", "work_item", ["client_id"], unique=False)
    op.create_index(
        "ix_work_item_responsible_user_id",
        "work_item",
        ["responsible_user_id"],
        unique=False,
    )
    op.create_index(
        "ix_work_item_accountable_user_id",
        "work_item",
        ["accountable_user_id"],
        unique=False,
    )
    op.create_index(
        "ix_work_item_tenant_department",
        "work_item",
        ["tenant_id", "department", "created_at"],
        unique=False,
    )
    op.create_index(
        "ix_work_item_tenant_status", "work_item", ["tenant_id", "status"], unique=False
    )
    op.create_index(
        "ix_work_item_consulted_user_ids",
        "work_item",
        ["consulted_user_ids"],
        postgresql_using="gin",
    )
    op.create_index(
        "ix_work_item_informed_user_ids",
        "work_item",
        ["informed_user_ids"],
        postgresql_using="gin",
    )

    op.create_table(
        "task_notification",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("task_id", sa.String(), nullable=False),
        sa.Column("task_table", sa.String(length=32), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("notification_type", sa.String(length=32), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenant.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["user_profile.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["task_id"], ["work_item.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_task_notification_tenant_id", "task_notification", ["tenant_id"], unique=False
    )
    op.create_index(
        "ix_task_notification_task_id", "task_notification", ["task_id"], unique=False
    )
    op.create_index(
        "ix_task_notification_recipient",
        "task_notification",
        ["tenant_id", "user_id", "created_at"],
        unique=False,
    )
    op.create_index(
        "ix_task_notification_unread",
        "task_notification",
        ["tenant_id", "user_id"],
        postgresql_where=sa.text("read = false"),
    )


def downgrade() -> None:
    op.drop_table("task_notification")
    op.drop_table("work_item")
    op.drop_table("user_profile")
    op.drop_table("tenant")
