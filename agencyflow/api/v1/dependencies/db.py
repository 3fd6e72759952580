"""Repository dependencies (composition root).

Read repositories use get_db; write repositories share the request's single
get_db_transactional session so a transition and its notifications commit together.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.infrastructure.persistence.database import get_db, get_db_transactional
from agencyflow.infrastructure.persistence.repositories import (
    CalendarEventRepository,
    ClientRepository,
    NotificationRepository,
    TenantRepository,
    UserRepository,
    WorkItemRepository,
)


async def get_tenant_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TenantRepository:
    """Tenant repository for read operations."""
    return TenantRepository(db)


async def get_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserRepository:
    """User profile repository (read-only)."""
    return UserRepository(db)


async def get_work_item_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> WorkItemRepository:
    """Work item repository for read operations."""
    return WorkItemRepository(db)


async def get_work_item_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> WorkItemRepository:
    """Work item repository for create/update/transition (transactional)."""
    return WorkItemRepository(db)


async def get_notification_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> NotificationRepository:
    """Notification repository for read operations."""
    return NotificationRepository(db)


async def get_notification_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> NotificationRepository:
    """Notification repository sharing the transactional session of the request."""
    return NotificationRepository(db)


async def get_client_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ClientRepository:
    """Client repository for read operations."""
    return ClientRepository(db)


async def get_client_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ClientRepository:
    return ClientRepository(db)


async def get_calendar_event_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CalendarEventRepository:
    return CalendarEventRepository(db)


async def get_calendar_event_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> CalendarEventRepository:
    """Calendar event repository for scheduling (transactional)."""
    return CalendarEventRepository(db)
