"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags.
"""

from fastapi import APIRouter

from agencyflow.api.v1.endpoints import (
    calendar_events,
    clients,
    health,
    notifications,
    users,
    work_items,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(
    calendar_events.router,
    prefix="/clients/{client_id}/calendar-events",
    tags=["calendar"],
)
api_router.include_router(
    work_items.router,
    prefix="/departments/{department}/work-items",
    tags=["work-items"],
)
api_router.include_router(work_items.mine_router, prefix="/work-items", tags=["work-items"])
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["notifications"]
)
