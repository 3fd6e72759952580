"""Calendar event operations on a client's weekly department calendar."""

from __future__ import annotations

from agencyflow.application.dtos.calendar_event import (
    CalendarEventCreate,
    CalendarEventResult,
)
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.interfaces.repositories import (
    ICalendarEventRepository,
    IClientRepository,
    IUserRepository,
)
from agencyflow.application.use_cases.work_items.work_item_operations import (
    _enum_value,
    _unique_ids,
)
from agencyflow.domain.enums import Department
from agencyflow.domain.exceptions import ResourceNotFoundException, ValidationException
from agencyflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class CalendarEventService:
    """Schedule and list events for one client and department area."""

    def __init__(
        self,
        calendar_event_repo: ICalendarEventRepository,
        client_repo: IClientRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.calendar_event_repo = calendar_event_repo
        self.client_repo = client_repo
        self.user_repo = user_repo

    async def _require_client(self, tenant_id: str, client_id: str) -> None:
        if await self.client_repo.get_by_id(tenant_id, client_id) is None:
            raise ResourceNotFoundException("client", client_id)

    async def list_events(
        self, actor: UserResult, client_id: str, area: str
    ) -> list[CalendarEventResult]:
        """Return the client's events in the area ordered by day, then start time."""
        area = _enum_value(Department, area, "area")
        await self._require_client(actor.tenant_id, client_id)
        return await self.calendar_event_repo.list_for_client_area(
            actor.tenant_id, client_id, area
        )

    async def create_event(
        self, actor: UserResult, client_id: str, data: CalendarEventCreate
    ) -> CalendarEventResult:
        data.area = _enum_value(Department, data.area, "area")
        concept = (data.concept or "").strip()
        if not concept:
            raise ValidationException("concept must not be empty", field="concept")
        data.concept = concept
        if data.end_time <= data.start_time:
            raise ValidationException(
                "end_time must be after start_time", field="end_time"
            )
        await self._require_client(actor.tenant_id, client_id)
        data.assigned_user_ids = _unique_ids(data.assigned_user_ids)
        existing = await self.user_repo.get_existing_ids(
            actor.tenant_id, data.assigned_user_ids
        )
        missing = sorted(set(data.assigned_user_ids) - existing)
        if missing:
            raise ValidationException(
                f"Unknown user(s) assigned: {', '.join(missing)}",
                field="assigned_user_ids",
            )

        event = await self.calendar_event_repo.create(
            actor.tenant_id, client_id, data, created_by=actor.id
        )
        logger.info(
            "Calendar event created: tenant=%s client=%s area=%s event=%s by user=%s",
            actor.tenant_id,
            client_id,
            data.area,
            event.id,
            actor.id,
        )
        return event
