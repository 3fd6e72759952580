"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on infrastructure directly.
Tests replace them through app.dependency_overrides.
"""

from .auth import get_actor, get_current_user, get_current_user_optional
from .client import (
    get_calendar_event_service,
    get_calendar_event_service_for_write,
    get_client_service,
    get_client_service_for_write,
)
from .db import (
    get_calendar_event_repo,
    get_calendar_event_repo_for_write,
    get_client_repo,
    get_client_repo_for_write,
    get_notification_repo,
    get_notification_repo_for_write,
    get_tenant_repo,
    get_user_repo,
    get_work_item_repo,
    get_work_item_repo_for_write,
)
from .notification import get_notification_service, get_notification_service_for_write
from .tenant import get_tenant, get_tenant_id
from .work_item import (
    get_task_workflow_service,
    get_work_item_service,
    get_work_item_service_for_write,
)

__all__ = [
    "get_actor",
    "get_calendar_event_repo",
    "get_calendar_event_repo_for_write",
    "get_calendar_event_service",
    "get_calendar_event_service_for_write",
    "get_client_repo",
    "get_client_repo_for_write",
    "get_client_service",
    "get_client_service_for_write",
    "get_current_user",
    "get_current_user_optional",
    "get_notification_repo",
    "get_notification_repo_for_write",
    "get_notification_service",
    "get_notification_service_for_write",
    "get_task_workflow_service",
    "get_tenant",
    "get_tenant_id",
    "get_tenant_repo",
    "get_user_repo",
    "get_work_item_repo",
    "get_work_item_repo_for_write",
    "get_work_item_service",
    "get_work_item_service_for_write",
]
