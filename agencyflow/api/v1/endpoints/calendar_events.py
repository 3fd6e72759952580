"""Calendar event API: a client's weekly calendar, one department area at a time."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from agencyflow.api.v1.dependencies import (
    get_actor,
    get_calendar_event_service,
    get_calendar_event_service_for_write,
)
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.use_cases.calendar import CalendarEventService
from agencyflow.core.limiter import limit_writes
from agencyflow.schemas.calendar_event import (
    CalendarEventCreateRequest,
    CalendarEventResponse,
)

router = APIRouter()


@router.get("", response_model=list[CalendarEventResponse])
async def list_calendar_events(
    client_id: str,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[CalendarEventService, Depends(get_calendar_event_service)],
    area: str = Query(..., description="Department area: marketing, branding or community"),
) -> list[CalendarEventResponse]:
    """List the client's events in one area, ordered by day and start time."""
    events = await service.list_events(actor, client_id, area)
    return [CalendarEventResponse.model_validate(e) for e in events]


@router.post("", response_model=CalendarEventResponse, status_code=201)
@limit_writes
async def create_calendar_event(
    request: Request,
    client_id: str,
    body: CalendarEventCreateRequest,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[
        CalendarEventService, Depends(get_calendar_event_service_for_write)
    ],
) -> CalendarEventResponse:
    event = await service.create_event(actor, client_id, body.to_dto())
    return CalendarEventResponse.model_validate(event)
