"""Calendar event repository. Events are read per client and department area."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.application.dtos.calendar_event import (
    CalendarEventCreate,
    CalendarEventResult,
)
from agencyflow.infrastructure.persistence.models.calendar_event import CalendarEvent
from agencyflow.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(e: CalendarEvent) -> CalendarEventResult:
    """Map CalendarEvent ORM to CalendarEventResult DTO."""
    return CalendarEventResult(
        id=e.id,
        tenant_id=e.tenant_id,
        client_id=e.client_id,
        area=e.area,
        concept=e.concept,
        description=e.description,
        day=e.day,
        start_time=e.start_time,
        end_time=e.end_time,
        assigned_user_ids=list(e.assigned_user_ids or []),
        created_by=e.created_by,
        created_at=e.created_at,
        updated_at=e.updated_at,
    )


class CalendarEventRepository(BaseRepository[CalendarEvent]):
    """Calendar event repository. Implements ICalendarEventRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, CalendarEvent)

    async def list_for_client_area(
        self, tenant_id: str, client_id: str, area: str
    ) -> list[CalendarEventResult]:
        result = await self.db.execute(
            select(CalendarEvent)
            .where(
                CalendarEvent.tenant_id == tenant_id,
                CalendarEvent.client_id == client_id,
                CalendarEvent.area == area,
            )
            .order_by(CalendarEvent.day, CalendarEvent.start_time, CalendarEvent.id)
        )
        return [_to_result(e) for e in result.scalars().all()]

    async def create(
        self,
        tenant_id: str,
        client_id: str,
        data: CalendarEventCreate,
        created_by: str,
    ) -> CalendarEventResult:
        event = CalendarEvent(
            tenant_id=tenant_id,
            client_id=client_id,
            area=data.area,
            concept=data.concept,
            description=data.description,
            day=data.day,
            start_time=data.start_time,
            end_time=data.end_time,
            assigned_user_ids=list(data.assigned_user_ids),
            created_by=created_by,
        )
        event = await self.add(event)
        return _to_result(event)
