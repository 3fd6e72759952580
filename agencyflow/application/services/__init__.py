"""Application services: RACI role resolution and notification fan-out."""

from agencyflow.application.services.notification_fanout import (
    NotificationFanoutService,
    build_notifications,
)
from agencyflow.application.services.raci import (
    allowed_operations,
    build_view,
    determine_roles,
    primary_action,
)

__all__ = [
    "NotificationFanoutService",
    "allowed_operations",
    "build_notifications",
    "build_view",
    "determine_roles",
    "primary_action",
]
