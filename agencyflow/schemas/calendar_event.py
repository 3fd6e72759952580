"""Calendar event API schemas."""

from __future__ import annotations

from datetime import date, datetime, time

from pydantic import BaseModel, ConfigDict, Field

from agencyflow.application.dtos.calendar_event import CalendarEventCreate


class CalendarEventCreateRequest(BaseModel):
    """Request body for scheduling an event on a client's calendar."""

    area: str = Field(..., description="Department: marketing, branding or community")
    concept: str = Field(..., min_length=1, max_length=500)
    description: str | None = None
    day: date
    start_time: time
    end_time: time
    assigned_user_ids: list[str] = Field(default_factory=list)

    def to_dto(self) -> CalendarEventCreate:
        return CalendarEventCreate(**self.model_dump())


class CalendarEventResponse(BaseModel):
    """Calendar event of one client in one department area."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    client_id: str
    area: str
    concept: str
    description: str | None
    day: date
    start_time: time
    end_time: time
    assigned_user_ids: list[str]
    created_by: str | None
    created_at: datetime
    updated_at: datetime
