"""Task notification ORM model. Created by workflow transitions; only `read` is ever updated."""

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from agencyflow.infrastructure.persistence.database import Base
from agencyflow.infrastructure.persistence.models.mixins import MultiTenantModel


class TaskNotification(MultiTenantModel, Base):
    """Notification for one recipient about one work item. Table: task_notification."""

    __tablename__ = "task_notification"

    user_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("user_profile.id", ondelete="CASCADE"),
        nullable=False,
    )
    task_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("work_item.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Department of the originating work item (the collection the task lives in).
    task_table: Mapped[str] = mapped_column(String(32), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    notification_type: Mapped[str] = mapped_column(String(32), nullable=False)
    read: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )

    __table_args__ = (
        Index("ix_task_notification_recipient", "tenant_id", "user_id", "created_at"),
        Index(
            "ix_task_notification_unread",
            "tenant_id",
            "user_id",
            postgresql_where=text("read = false"),
        ),
    )
