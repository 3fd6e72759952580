"""Persistence models: ORM entities and mixins."""

from agencyflow.infrastructure.persistence.models.calendar_event import CalendarEvent
from agencyflow.infrastructure.persistence.models.client import Client
from agencyflow.infrastructure.persistence.models.mixins import (
    CuidMixin,
    MultiTenantModel,
    TenantMixin,
    TimestampMixin,
)
from agencyflow.infrastructure.persistence.models.notification import TaskNotification
from agencyflow.infrastructure.persistence.models.tenant import Tenant
from agencyflow.infrastructure.persistence.models.user_profile import UserProfile
from agencyflow.infrastructure.persistence.models.work_item import WorkItem

__all__ = [
    "Tenant",
    "Client",
    "CalendarEvent",
    "UserProfile",
    "WorkItem",
    "TaskNotification",
    "CuidMixin",
    "TenantMixin",
    "TimestampMixin",
    "MultiTenantModel",
]
