"""DTOs for client calendar events (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time


@dataclass(frozen=True)
class CalendarEventResult:
    """Calendar event read-model. area is a department value."""

    id: str
    tenant_id: str
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


@dataclass
class CalendarEventCreate:
    """Input for scheduling an event on a client's department calendar."""

    area: str
    concept: str
    day: date
    start_time: time
    end_time: time
    description: str | None = None
    assigned_user_ids: list[str] = field(default_factory=list)
