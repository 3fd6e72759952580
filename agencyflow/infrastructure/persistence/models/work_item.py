"""Work item ORM model: one table for every department, discriminated by department."""

from datetime import datetime
from typing import Any

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, String, Text, text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column

from agencyflow.domain.enums import Department, InfoType, Priority, TaskStatus
from agencyflow.infrastructure.persistence.database import Base
from agencyflow.infrastructure.persistence.models.mixins import MultiTenantModel
from agencyflow.infrastructure.persistence.models.tenant import in_values_check


def _user_fk(nullable: bool = True) -> Any:
    return mapped_column(
        String,
        ForeignKey("user_profile.id", ondelete="SET NULL"),
        nullable=nullable,
    )


class WorkItem(MultiTenantModel, Base):
    """Department work item under the RACI workflow. Table: work_item."""

    __tablename__ = "work_item"

    department: Mapped[str] = mapped_column(String(32), nullable=False)
    info_type: Mapped[str] = mapped_column(
        String(32), nullable=False, default=InfoType.TASK.value, server_default="task"
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    priority: Mapped[str] = mapped_column(
        String(16), nullable=False, default=Priority.MEDIUM.value, server_default="medium"
    )
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    client_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("client.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    # "metadata" is reserved on declarative classes
    item_metadata: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata", JSONB, nullable=True
    )

    responsible_user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("user_profile.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    accountable_user_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("user_profile.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    consulted_user_ids: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list, server_default=text("'{}'")
    )
    informed_user_ids: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list, server_default=text("'{}'")
    )

    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=TaskStatus.PENDING.value,
        server_default="pending",
    )
    completion_content: Mapped[str | None] = mapped_column(Text, nullable=True)
    correction_feedback: Mapped[str | None] = mapped_column(Text, nullable=True)
    consulted_content: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_by: Mapped[str | None] = _user_fk()
    completed_by: Mapped[str | None] = _user_fk()
    reviewed_by: Mapped[str | None] = _user_fk()
    consulted_by: Mapped[str | None] = _user_fk()

    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    reviewed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    correction_requested_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    consulted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_work_item_tenant_department", "tenant_id", "department", "created_at"),
        Index("ix_work_item_tenant_status", "tenant_id", "status"),
        Index(
            "ix_work_item_consulted_user_ids",
            "consulted_user_ids",
            postgresql_using="gin",
        ),
        Index(
            "ix_work_item_informed_user_ids",
            "informed_user_ids",
            postgresql_using="gin",
        ),
        CheckConstraint(
            in_values_check("department", Department.values()),
            name="work_item_department_check",
        ),
        CheckConstraint(
            in_values_check("info_type", InfoType.values()),
            name="work_item_info_type_check",
        ),
        CheckConstraint(
            in_values_check("priority", Priority.values()),
            name="work_item_priority_check",
        ),
        CheckConstraint(
            in_values_check("status", TaskStatus.values()),
            name="work_item_status_check",
        ),
    )
