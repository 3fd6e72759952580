"""Notification service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from agencyflow.application.use_cases.notifications import NotificationService
from agencyflow.core.config import get_settings
from agencyflow.infrastructure.persistence.repositories import NotificationRepository

from .db import get_notification_repo, get_notification_repo_for_write


async def get_notification_service(
    notification_repo: Annotated[
        NotificationRepository, Depends(get_notification_repo)
    ],
) -> NotificationService:
    """NotificationService for reads (list, unread count)."""
    return NotificationService(
        notification_repo,
        poll_interval_seconds=get_settings().notification_poll_interval_seconds,
    )


async def get_notification_service_for_write(
    notification_repo: Annotated[
        NotificationRepository, Depends(get_notification_repo_for_write)
    ],
) -> NotificationService:
    """NotificationService for read-state updates (transactional)."""
    return NotificationService(
        notification_repo,
        poll_interval_seconds=get_settings().notification_poll_interval_seconds,
    )
