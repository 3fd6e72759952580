"""Task notification API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationResponse(BaseModel):
    """One notification addressed to the current user."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    task_id: str
    task_table: str = Field(..., description="Department of the work item")
    message: str
    notification_type: str
    read: bool
    created_at: datetime


class NotificationListResponse(BaseModel):
    """Notifications page with unread count; clients re-poll every poll_interval_seconds."""

    items: list[NotificationResponse]
    unread_count: int
    poll_interval_seconds: int


class UnreadCountResponse(BaseModel):
    """Unread notifications of the current user."""

    unread_count: int


class MarkAllReadResponse(BaseModel):
    """Number of notifications flipped to read."""

    updated: int
