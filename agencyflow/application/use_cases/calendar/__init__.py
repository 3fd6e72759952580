"""Calendar use cases: schedule and list client events per department area."""

from agencyflow.application.use_cases.calendar.calendar_event_operations import (
    CalendarEventService,
)

__all__ = ["CalendarEventService"]
