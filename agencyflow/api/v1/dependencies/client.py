"""Client and calendar service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from agencyflow.application.use_cases.calendar import CalendarEventService
from agencyflow.application.use_cases.clients import ClientService
from agencyflow.infrastructure.persistence.repositories import (
    CalendarEventRepository,
    ClientRepository,
    UserRepository,
)

from .db import (
    get_calendar_event_repo,
    get_calendar_event_repo_for_write,
    get_client_repo,
    get_client_repo_for_write,
    get_user_repo,
)


async def get_client_service(
    client_repo: Annotated[ClientRepository, Depends(get_client_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> ClientService:
    """ClientService for reads (list, get)."""
    return ClientService(client_repo=client_repo, user_repo=user_repo)


async def get_client_service_for_write(
    client_repo: Annotated[ClientRepository, Depends(get_client_repo_for_write)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> ClientService:
    """ClientService for create (transactional)."""
    return ClientService(client_repo=client_repo, user_repo=user_repo)


async def get_calendar_event_service(
    calendar_event_repo: Annotated[
        CalendarEventRepository, Depends(get_calendar_event_repo)
    ],
    client_repo: Annotated[ClientRepository, Depends(get_client_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> CalendarEventService:
    return CalendarEventService(
        calendar_event_repo=calendar_event_repo,
        client_repo=client_repo,
        user_repo=user_repo,
    )


async def get_calendar_event_service_for_write(
    calendar_event_repo: Annotated[
        CalendarEventRepository, Depends(get_calendar_event_repo_for_write)
    ],
    client_repo: Annotated[ClientRepository, Depends(get_client_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> CalendarEventService:
    """CalendarEventService for scheduling (transactional)."""
    return CalendarEventService(
        calendar_event_repo=calendar_event_repo,
        client_repo=client_repo,
        user_repo=user_repo,
    )
