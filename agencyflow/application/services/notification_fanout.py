"""Notification fan-out for workflow transitions.

Recipients come only from the work item's RACI fields at the moment of the
transition (no subscription lists, no deduplication: a user who is both
accountable and informed receives two notifications). Persistence is
best-effort: a failed insert is logged and never undoes the transition.
"""

from __future__ import annotations

from agencyflow.application.dtos.notification import (
    NotificationCreate,
    NotificationResult,
)
from agencyflow.application.dtos.work_item import WorkItemResult
from agencyflow.application.interfaces.repositories import INotificationRepository
from agencyflow.domain.enums import NotificationType, TransitionOperation
from agencyflow.domain.exceptions import NotificationDeliveryException
from agencyflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

# (message for the directly affected party, message for informed users)
_MESSAGES: dict[TransitionOperation, tuple[str, str]] = {
    TransitionOperation.COMPLETE: (
        '"{title}" has been completed and is ready for review',
        'The task "{title}" has been updated',
    ),
    TransitionOperation.APPROVE: (
        'Your task "{title}" has been approved',
        'The task "{title}" has been finalized',
    ),
    TransitionOperation.REQUEST_CORRECTION: (
        'A correction has been requested for "{title}"',
        'A correction was requested for "{title}"',
    ),
    TransitionOperation.SUBMIT_CONSULTED_INPUT: (
        'Consultation input was added to "{title}"',
        'The consultation for "{title}" has been updated',
    ),
}


def _direct_recipients(
    operation: TransitionOperation, item: WorkItemResult
) -> list[tuple[str, NotificationType]]:
    """Non-informed recipients and their notification type for the operation."""
    if operation == TransitionOperation.COMPLETE:
        if item.accountable_user_id:
            return [(item.accountable_user_id, NotificationType.TASK_COMPLETED)]
        return []
    if operation == TransitionOperation.APPROVE:
        return [(item.responsible_user_id, NotificationType.TASK_APPROVED)]
    if operation == TransitionOperation.REQUEST_CORRECTION:
        return [(item.responsible_user_id, NotificationType.CORRECTION_REQUESTED)]
    recipients = [(item.responsible_user_id, NotificationType.CONSULTED_ACTION)]
    if item.accountable_user_id:
        recipients.append((item.accountable_user_id, NotificationType.CONSULTED_ACTION))
    return recipients


def build_notifications(
    operation: TransitionOperation, item: WorkItemResult
) -> list[NotificationCreate]:
    """Translate a transition on item into one notification per interested user."""
    direct_message, informed_message = _MESSAGES[operation]
    notifications = [
        NotificationCreate(
            tenant_id=item.tenant_id,
            user_id=user_id,
            task_id=item.id,
            task_table=item.department,
            message=direct_message.format(title=item.title),
            notification_type=notification_type.value,
        )
        for user_id, notification_type in _direct_recipients(operation, item)
        if user_id
    ]
    notifications.extend(
        NotificationCreate(
            tenant_id=item.tenant_id,
            user_id=user_id,
            task_id=item.id,
            task_table=item.department,
            message=informed_message.format(title=item.title),
            notification_type=NotificationType.TASK_UPDATED.value,
        )
        for user_id in item.informed_user_ids
    )
    return notifications


class NotificationFanoutService:
    """Persists the fan-out of a transition; failures are logged, not raised."""

    def __init__(self, notification_repo: INotificationRepository) -> None:
        self.notification_repo = notification_repo

    async def dispatch(
        self, operation: TransitionOperation, item: WorkItemResult
    ) -> list[NotificationResult]:
        """Build and persist notifications for a completed transition.

        Returns the persisted notifications, or an empty list when there are no
        recipients or the store rejected the batch.
        """
        batch = build_notifications(operation, item)
        if not batch:
            return []
        try:
            created = await self.notification_repo.create_many(batch)
        except NotificationDeliveryException as e:
            logger.warning(
                "Notification fan-out failed (tenant=%s, department=%s, work_item=%s, operation=%s, recipients=%d): %s",
                item.tenant_id,
                item.department,
                item.id,
                operation.value,
                len(batch),
                e.details.get("reason", e.message),
                exc_info=True,
            )
            return []
        logger.debug(
            "Notification fan-out: %d notification(s) for work_item=%s operation=%s",
            len(created),
            item.id,
            operation.value,
        )
        return created
