"""Application DTOs (no dependency on ORM)."""

from agencyflow.application.dtos.calendar_event import (
    CalendarEventCreate,
    CalendarEventResult,
)
from agencyflow.application.dtos.client import ClientCreate, ClientResult
from agencyflow.application.dtos.notification import (
    NotificationCreate,
    NotificationPage,
    NotificationResult,
)
from agencyflow.application.dtos.tenant import TenantResult
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.dtos.work_item import (
    TransitionResult,
    WorkItemAssignmentUpdate,
    WorkItemCreate,
    WorkItemResult,
    WorkItemView,
)

__all__ = [
    "CalendarEventCreate",
    "CalendarEventResult",
    "ClientCreate",
    "ClientResult",
    "NotificationCreate",
    "NotificationPage",
    "NotificationResult",
    "TenantResult",
    "TransitionResult",
    "UserResult",
    "WorkItemAssignmentUpdate",
    "WorkItemCreate",
    "WorkItemResult",
    "WorkItemView",
]
