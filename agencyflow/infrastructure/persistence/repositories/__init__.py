"""Repository implementations (adapters for application interfaces)."""

from agencyflow.infrastructure.persistence.repositories.base import BaseRepository
from agencyflow.infrastructure.persistence.repositories.calendar_event_repo import (
    CalendarEventRepository,
)
from agencyflow.infrastructure.persistence.repositories.client_repo import (
    ClientRepository,
)
from agencyflow.infrastructure.persistence.repositories.notification_repo import (
    NotificationRepository,
)
from agencyflow.infrastructure.persistence.repositories.tenant_repo import (
    TenantRepository,
)
from agencyflow.infrastructure.persistence.repositories.user_repo import UserRepository
from agencyflow.infrastructure.persistence.repositories.work_item_repo import (
    WorkItemRepository,
)

__all__ = [
    "BaseRepository",
    "CalendarEventRepository",
    "ClientRepository",
    "NotificationRepository",
    "TenantRepository",
    "UserRepository",
    "WorkItemRepository",
]
