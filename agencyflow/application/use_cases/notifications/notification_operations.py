"""Notification operations for the recipient: list, unread count, mark read.

Read-state updates are idempotent: marking an already-read notification (or
marking all when none are unread) changes nothing and succeeds.
"""

from __future__ import annotations

from dataclasses import replace

from agencyflow.application.dtos.notification import NotificationPage, NotificationResult
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.interfaces.repositories import INotificationRepository
from agencyflow.domain.exceptions import ResourceNotFoundException
from agencyflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """Recipient-scoped notification queries and read-state updates."""

    def __init__(
        self,
        notification_repo: INotificationRepository,
        poll_interval_seconds: int = 30,
    ) -> None:
        self.notification_repo = notification_repo
        self.poll_interval_seconds = poll_interval_seconds

    async def list_notifications(
        self,
        actor: UserResult,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> NotificationPage:
        """Return the actor's notifications (newest first) with unread count and poll interval."""
        items = await self.notification_repo.list_for_user(
            actor.tenant_id, actor.id, unread_only=unread_only, skip=skip, limit=limit
        )
        unread = await self.notification_repo.count_unread(actor.tenant_id, actor.id)
        return NotificationPage(
            items=items,
            unread_count=unread,
            poll_interval_seconds=self.poll_interval_seconds,
        )

    async def unread_count(self, actor: UserResult) -> int:
        return await self.notification_repo.count_unread(actor.tenant_id, actor.id)

    async def mark_read(
        self, actor: UserResult, notification_id: str
    ) -> NotificationResult:
        """Mark one of the actor's notifications read.

        Notifications of other users are reported as not found.
        """
        notification = await self.notification_repo.get_by_id(
            actor.tenant_id, notification_id
        )
        if notification is None or notification.user_id != actor.id:
            raise ResourceNotFoundException("notification", notification_id)
        if notification.read:
            return notification
        await self.notification_repo.mark_read(actor.tenant_id, notification_id)
        return replace(notification, read=True)

    async def mark_all_read(self, actor: UserResult) -> int:
        """Mark every unread notification of the actor read; return how many changed."""
        changed = await self.notification_repo.mark_all_read(actor.tenant_id, actor.id)
        if changed:
            logger.debug("Marked %d notification(s) read for user=%s", changed, actor.id)
        return changed
