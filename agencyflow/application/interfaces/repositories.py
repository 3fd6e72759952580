"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from agencyflow.application.dtos.calendar_event import (
        CalendarEventCreate,
        CalendarEventResult,
    )
    from agencyflow.application.dtos.client import ClientCreate, ClientResult
    from agencyflow.application.dtos.notification import (
        NotificationCreate,
        NotificationResult,
    )
    from agencyflow.application.dtos.tenant import TenantResult
    from agencyflow.application.dtos.user import UserResult
    from agencyflow.application.dtos.work_item import WorkItemCreate, WorkItemResult


class ITenantRepository(Protocol):
    """Protocol for tenant (agency) lookups."""

    async def get_by_id(self, tenant_id: str) -> TenantResult | None:
        """Return tenant by id, or None."""


class IUserRepository(Protocol):
    """Protocol for user profile reads. Profiles are owned by the auth provider."""

    async def get_by_id_and_tenant(
        self, user_id: str, tenant_id: str
    ) -> UserResult | None:
        """Return the user profile if it exists in the tenant."""

    async def list_by_tenant(
        self, tenant_id: str, skip: int = 0, limit: int = 100
    ) -> list[UserResult]:
        """Return active profiles in the tenant ordered by name."""

    async def get_existing_ids(self, tenant_id: str, user_ids: Iterable[str]) -> set[str]:
        """Return the subset of user_ids that are active profiles in the tenant."""


class IClientRepository(Protocol):
    """Protocol for tenant clients."""

    async def get_by_id(self, tenant_id: str, client_id: str) -> ClientResult | None:
        """Return the client in the tenant, or None."""

    async def list_by_tenant(
        self, tenant_id: str, skip: int = 0, limit: int = 100
    ) -> list[ClientResult]:
        """Return the tenant's clients, newest first."""

    async def create(
        self, tenant_id: str, data: ClientCreate, created_by: str
    ) -> ClientResult:
        """Insert a client."""


class ICalendarEventRepository(Protocol):
    """Protocol for client calendar events."""

    async def list_for_client_area(
        self, tenant_id: str, client_id: str, area: str
    ) -> list[CalendarEventResult]:
        """Return the client's events in the area ordered by day and start time."""

    async def create(
        self,
        tenant_id: str,
        client_id: str,
        data: CalendarEventCreate,
        created_by: str,
    ) -> CalendarEventResult:
        """Insert a calendar event."""


class IWorkItemRepository(Protocol):
    """Protocol for department work items. Every call is scoped by tenant and department."""

    async def get_by_id(
        self, tenant_id: str, department: str, item_id: str
    ) -> WorkItemResult | None:
        """Return the work item, or None when missing in this tenant/department."""

    async def list_items(
        self,
        tenant_id: str,
        department: str,
        *,
        status: str | None = None,
        info_type: str | None = None,
        client_id: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WorkItemResult]:
        """Return work items for the department, newest first."""

    async def list_for_user(
        self,
        tenant_id: str,
        user_id: str,
        *,
        role: str | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WorkItemResult]:
        """Return work items across departments where the user holds any (or the given) RACI role."""

    async def create(
        self,
        tenant_id: str,
        department: str,
        data: WorkItemCreate,
        created_by: str,
    ) -> WorkItemResult:
        """Insert a pending work item."""

    async def update_fields(
        self,
        tenant_id: str,
        department: str,
        item_id: str,
        values: dict[str, Any],
    ) -> WorkItemResult | None:
        """Apply a partial update; return the updated item or None when missing."""

    async def update_if_status(
        self,
        tenant_id: str,
        department: str,
        item_id: str,
        expected_statuses: Iterable[str] | None,
        values: dict[str, Any],
    ) -> WorkItemResult | None:
        """Compare-and-swap update: apply values only while status is in expected_statuses.

        expected_statuses None applies the update regardless of status.
        Returns the updated item, or None when no row matched (missing or stale).
        """


class INotificationRepository(Protocol):
    """Protocol for task notifications."""

    async def create_many(
        self, notifications: list[NotificationCreate]
    ) -> list[NotificationResult]:
        """Insert a batch atomically. Raises NotificationDeliveryException on store failure."""

    async def list_for_user(
        self,
        tenant_id: str,
        user_id: str,
        *,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> list[NotificationResult]:
        """Return the recipient's notifications, newest first."""

    async def count_unread(self, tenant_id: str, user_id: str) -> int:
        """Return the number of unread notifications for the recipient."""

    async def get_by_id(
        self, tenant_id: str, notification_id: str
    ) -> NotificationResult | None:
        """Return notification by id in tenant, or None."""

    async def mark_read(self, tenant_id: str, notification_id: str) -> bool:
        """Set read=true; return whether the row exists. Idempotent."""

    async def mark_all_read(self, tenant_id: str, user_id: str) -> int:
        """Set read=true on all unread rows of the recipient; return rows changed."""
