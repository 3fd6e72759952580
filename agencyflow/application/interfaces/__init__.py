"""Ports (Protocols) for the application layer."""

from agencyflow.application.interfaces.repositories import (
    INotificationRepository,
    ITenantRepository,
    IUserRepository,
    IWorkItemRepository,
)

__all__ = [
    "INotificationRepository",
    "ITenantRepository",
    "IUserRepository",
    "IWorkItemRepository",
]
