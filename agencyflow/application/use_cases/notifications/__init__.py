"""Notification use cases: list, count, mark read."""

from agencyflow.application.use_cases.notifications.notification_operations import (
    NotificationService,
)

__all__ = ["NotificationService"]
