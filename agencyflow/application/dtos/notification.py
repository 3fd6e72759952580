"""DTOs for task notifications (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class NotificationCreate:
    """One notification to persist as a side effect of a transition."""

    tenant_id: str
    user_id: str
    task_id: str
    task_table: str
    message: str
    notification_type: str


@dataclass(frozen=True)
class NotificationResult:
    """Notification read-model."""

    id: str
    tenant_id: str
    user_id: str
    task_id: str
    task_table: str
    message: str
    notification_type: str
    read: bool
    created_at: datetime


@dataclass(frozen=True)
class NotificationPage:
    """Notifications for one recipient plus unread count and polling hint."""

    items: list[NotificationResult] = field(default_factory=list)
    unread_count: int = 0
    poll_interval_seconds: int = 30
