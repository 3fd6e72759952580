"""Task notification repository. Batch inserts run in a SAVEPOINT so a failure never undoes the transition."""

from __future__ import annotations

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.application.dtos.notification import (
    NotificationCreate,
    NotificationResult,
)
from agencyflow.domain.exceptions import NotificationDeliveryException
from agencyflow.infrastructure.persistence.models.notification import TaskNotification
from agencyflow.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(n: TaskNotification) -> NotificationResult:
    """Map TaskNotification ORM to NotificationResult DTO."""
    return NotificationResult(
        id=n.id,
        tenant_id=n.tenant_id,
        user_id=n.user_id,
        task_id=n.task_id,
        task_table=n.task_table,
        message=n.message,
        notification_type=n.notification_type,
        read=n.read,
        created_at=n.created_at,
    )


class NotificationRepository(BaseRepository[TaskNotification]):
    """Notification repository. Implements INotificationRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TaskNotification)

    async def create_many(
        self, notifications: list[NotificationCreate]
    ) -> list[NotificationResult]:
        """Insert all notifications or none.

        Raises:
            NotificationDeliveryException: If the insert fails; the savepoint
                is rolled back and the outer transaction stays usable.
        """
        if not notifications:
            return []
        rows = [
            TaskNotification(
                tenant_id=n.tenant_id,
                user_id=n.user_id,
                task_id=n.task_id,
                task_table=n.task_table,
                message=n.message,
                notification_type=n.notification_type,
                read=False,
            )
            for n in notifications
        ]
        try:
            async with self.db.begin_nested():
                self.db.add_all(rows)
                await self.db.flush()
            for row in rows:
                await self.db.refresh(row)
        except SQLAlchemyError as e:
            raise NotificationDeliveryException(
                task_id=notifications[0].task_id,
                recipient_count=len(notifications),
                reason=str(e.__class__.__name__),
            ) from e
        return [_to_result(r) for r in rows]

    async def list_for_user(
        self,
        tenant_id: str,
        user_id: str,
        *,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> list[NotificationResult]:
        q = select(TaskNotification).where(
            TaskNotification.tenant_id == tenant_id,
            TaskNotification.user_id == user_id,
        )
        if unread_only:
            q = q.where(TaskNotification.read.is_(False))
        q = (
            q.order_by(TaskNotification.created_at.desc(), TaskNotification.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(q)
        return [_to_result(n) for n in result.scalars().all()]

    async def count_unread(self, tenant_id: str, user_id: str) -> int:
        result = await self.db.execute(
            select(func.count())
            .select_from(TaskNotification)
            .where(
                TaskNotification.tenant_id == tenant_id,
                TaskNotification.user_id == user_id,
                TaskNotification.read.is_(False),
            )
        )
        return int(result.scalar_one())

    async def get_by_id(
        self, tenant_id: str, notification_id: str
    ) -> NotificationResult | None:
        n = await self.get_scoped(tenant_id, notification_id)
        return _to_result(n) if n else None

    async def mark_read(self, tenant_id: str, notification_id: str) -> bool:
        result = await self.db.execute(
            update(TaskNotification)
            .where(
                TaskNotification.id == notification_id,
                TaskNotification.tenant_id == tenant_id,
            )
            .values(read=True)
            .execution_options(synchronize_session=False)
        )
        return (result.rowcount or 0) > 0

    async def mark_all_read(self, tenant_id: str, user_id: str) -> int:
        result = await self.db.execute(
            update(TaskNotification)
            .where(
                TaskNotification.tenant_id == tenant_id,
                TaskNotification.user_id == user_id,
                TaskNotification.read.is_(False),
            )
            .values(read=True)
            .execution_options(synchronize_session=False)
        )
        return int(result.rowcount or 0)
