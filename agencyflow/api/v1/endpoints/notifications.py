"""Notification API for the current user: list, unread count, mark read."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from agencyflow.api.v1.dependencies import (
    get_actor,
    get_notification_service,
    get_notification_service_for_write,
)
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.use_cases.notifications import NotificationService
from agencyflow.core.config import get_settings
from agencyflow.schemas.notification import (
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)

router = APIRouter()


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
    unread_only: bool = Query(False),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1),
) -> NotificationListResponse:
    """Newest notifications first, with unread count and the polling interval."""
    limit = min(limit, get_settings().notification_page_size_max)
    page = await service.list_notifications(
        actor, unread_only=unread_only, skip=skip, limit=limit
    )
    return NotificationListResponse(
        items=[NotificationResponse.model_validate(n) for n in page.items],
        unread_count=page.unread_count,
        poll_interval_seconds=page.poll_interval_seconds,
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> UnreadCountResponse:
    return UnreadCountResponse(unread_count=await service.unread_count(actor))


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[
        NotificationService, Depends(get_notification_service_for_write)
    ],
) -> MarkAllReadResponse:
    """Mark every unread notification of the caller read. Idempotent."""
    return MarkAllReadResponse(updated=await service.mark_all_read(actor))


@router.post("/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[
        NotificationService, Depends(get_notification_service_for_write)
    ],
) -> NotificationResponse:
    """Mark one of the caller's notifications read. Idempotent."""
    notification = await service.mark_read(actor, notification_id)
    return NotificationResponse.model_validate(notification)
