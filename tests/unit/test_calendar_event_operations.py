"""CalendarEventService tests: scheduling rules and per-area listing."""

from datetime import date, time

import pytest

from agencyflow.application.dtos.calendar_event import CalendarEventCreate
from agencyflow.application.dtos.client import ClientCreate
from agencyflow.domain.exceptions import ResourceNotFoundException, ValidationException


def _event(**overrides) -> CalendarEventCreate:
    data = {
        "area": "community",
        "concept": "Instagram live Q&A",
        "day": date(2026, 10, 21),
        "start_time": time(10, 0),
        "end_time": time(11, 0),
        "assigned_user_ids": ["u1"],
    }
    data.update(overrides)
    return CalendarEventCreate(**data)


async def test_create_event(calendar_service, users, acme_client) -> None:
    event = await calendar_service.create_event(
        users["u2"], acme_client.id, _event(concept="  Instagram live Q&A ")
    )
    assert event.client_id == acme_client.id
    assert event.area == "community"
    assert event.concept == "Instagram live Q&A"
    assert event.assigned_user_ids == ["u1"]
    assert event.created_by == "u2"


async def test_list_filters_by_area_and_orders_by_day_and_time(
    calendar_service, users, acme_client
) -> None:
    actor = users["u1"]
    late = _event(concept="Wed late", start_time=time(15, 0), end_time=time(16, 0))
    early = _event(concept="Wed early", start_time=time(9, 0), end_time=time(9, 30))
    await calendar_service.create_event(actor, acme_client.id, late)
    await calendar_service.create_event(
        actor, acme_client.id, _event(concept="Mon", day=date(2026, 10, 19))
    )
    await calendar_service.create_event(actor, acme_client.id, early)
    await calendar_service.create_event(
        actor, acme_client.id, _event(concept="Logo review", area="branding")
    )

    events = await calendar_service.list_events(actor, acme_client.id, "community")

    assert [e.concept for e in events] == ["Mon", "Wed early", "Wed late"]


async def test_list_other_client_is_empty(
    calendar_service, client_service, users, acme_client
) -> None:
    await calendar_service.create_event(users["u1"], acme_client.id, _event())
    other = await client_service.create_client(users["u1"], ClientCreate(name="Other"))
    assert await calendar_service.list_events(users["u1"], other.id, "community") == []


@pytest.mark.parametrize(
    ("start", "end"), [(time(11, 0), time(10, 0)), (time(10, 0), time(10, 0))]
)
async def test_end_must_follow_start(
    calendar_service, calendar_event_repo, users, acme_client, start, end
) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await calendar_service.create_event(
            users["u1"], acme_client.id, _event(start_time=start, end_time=end)
        )
    assert exc_info.value.details == {"field": "end_time"}
    assert calendar_event_repo.events == {}


async def test_unknown_area_rejected(calendar_service, users, acme_client) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await calendar_service.create_event(
            users["u1"], acme_client.id, _event(area="sales")
        )
    assert exc_info.value.details == {"field": "area"}


async def test_unknown_assignee_rejected(calendar_service, users, acme_client) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await calendar_service.create_event(
            users["u1"], acme_client.id, _event(assigned_user_ids=["u1", "outsider"])
        )
    assert exc_info.value.details == {"field": "assigned_user_ids"}


async def test_missing_client_is_not_found(calendar_service, users) -> None:
    with pytest.raises(ResourceNotFoundException):
        await calendar_service.create_event(users["u1"], "missing", _event())
    with pytest.raises(ResourceNotFoundException):
        await calendar_service.list_events(users["u1"], "missing", "community")


async def test_client_of_other_tenant_is_not_found(
    calendar_service, users, acme_client
) -> None:
    with pytest.raises(ResourceNotFoundException):
        await calendar_service.list_events(users["outsider"], acme_client.id, "community")
