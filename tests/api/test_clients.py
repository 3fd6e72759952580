"""Client and calendar event routes."""

from decimal import Decimal

from httpx import AsyncClient

BASE = "/api/v1/clients"


async def _create_client(client: AsyncClient, auth_headers, **overrides) -> dict:
    body = {
        "name": "Harbor Coffee launch",
        "client_name": "Harbor Coffee",
        "type": "retail",
        "phase": "discovery",
        "budget": "12500.00",
        "start_date": "2026-11-01",
        "deadline": "2027-01-31",
        "team": ["u1", "u2"],
    }
    body.update(overrides)
    response = await client.post(BASE, json=body, headers=auth_headers("u2"))
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_client(client: AsyncClient, auth_headers) -> None:
    data = await _create_client(client, auth_headers)
    assert data["name"] == "Harbor Coffee launch"
    assert data["status"] == "active"
    assert data["progress"] == 0
    assert Decimal(data["budget"]) == Decimal("12500")
    assert data["deadline"] == "2027-01-31"
    assert data["team"] == ["u1", "u2"]
    assert data["created_by"] == "u2"


async def test_list_clients_newest_first(client: AsyncClient, auth_headers) -> None:
    first = await _create_client(client, auth_headers, name="First")
    second = await _create_client(client, auth_headers, name="Second")

    response = await client.get(BASE, headers=auth_headers("u3"))

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [second["id"], first["id"]]


async def test_get_client(client: AsyncClient, auth_headers) -> None:
    created = await _create_client(client, auth_headers)
    response = await client.get(f"{BASE}/{created['id']}", headers=auth_headers("u5"))
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]


async def test_get_client_of_other_tenant_returns_404(
    client: AsyncClient, auth_headers
) -> None:
    created = await _create_client(client, auth_headers)
    response = await client.get(
        f"{BASE}/{created['id']}", headers=auth_headers("outsider")
    )
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_create_client_invalid_status_returns_400(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.post(
        BASE, json={"name": "Acme", "status": "archived"}, headers=auth_headers("u1")
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "status"}


async def test_create_client_progress_out_of_range_returns_422(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.post(
        BASE, json={"name": "Acme", "progress": 150}, headers=auth_headers("u1")
    )
    assert response.status_code == 422


async def test_clients_require_authentication(client: AsyncClient) -> None:
    response = await client.get(BASE, headers={"X-Tenant-ID": "tenant-acme"})
    assert response.status_code == 401


async def test_work_item_with_unknown_client_returns_400(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.post(
        "/api/v1/departments/branding/work-items",
        json={"title": "Logo refresh", "responsible_user_id": "u1", "client_id": "nope"},
        headers=auth_headers("admin"),
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "client_id"}


async def test_work_item_linked_to_client(client: AsyncClient, auth_headers) -> None:
    created = await _create_client(client, auth_headers)
    url = "/api/v1/departments/branding/work-items"
    response = await client.post(
        url,
        json={
            "title": "Logo refresh",
            "responsible_user_id": "u1",
            "client_id": created["id"],
        },
        headers=auth_headers("admin"),
    )
    assert response.status_code == 201, response.text

    listed = await client.get(
        url, params={"client_id": created["id"]}, headers=auth_headers("u1")
    )
    assert [i["title"] for i in listed.json()] == ["Logo refresh"]


async def test_calendar_events_by_client_and_area(
    client: AsyncClient, auth_headers
) -> None:
    created = await _create_client(client, auth_headers)
    url = f"{BASE}/{created['id']}/calendar-events"
    for concept, area, start, end in [
        ("Afternoon post", "community", "15:00:00", "15:30:00"),
        ("Morning story", "community", "09:00:00", "09:15:00"),
        ("Palette review", "branding", "10:00:00", "11:00:00"),
    ]:
        response = await client.post(
            url,
            json={
                "area": area,
                "concept": concept,
                "day": "2026-10-21",
                "start_time": start,
                "end_time": end,
                "assigned_user_ids": ["u1"],
            },
            headers=auth_headers("u2"),
        )
        assert response.status_code == 201, response.text

    response = await client.get(
        url, params={"area": "community"}, headers=auth_headers("u1")
    )

    assert response.status_code == 200
    events = response.json()
    assert [e["concept"] for e in events] == ["Morning story", "Afternoon post"]
    assert events[0]["start_time"] == "09:00:00"
    assert events[0]["client_id"] == created["id"]


async def test_calendar_event_end_before_start_returns_400(
    client: AsyncClient, auth_headers
) -> None:
    created = await _create_client(client, auth_headers)
    response = await client.post(
        f"{BASE}/{created['id']}/calendar-events",
        json={
            "area": "marketing",
            "concept": "Launch call",
            "day": "2026-10-22",
            "start_time": "12:00:00",
            "end_time": "11:00:00",
        },
        headers=auth_headers("u1"),
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "end_time"}


async def test_calendar_for_missing_client_returns_404(
    client: AsyncClient, auth_headers
) -> None:
    response = await client.get(
        f"{BASE}/missing/calendar-events",
        params={"area": "marketing"},
        headers=auth_headers("u1"),
    )
    assert response.status_code == 404


async def test_calendar_list_requires_area(client: AsyncClient, auth_headers) -> None:
    created = await _create_client(client, auth_headers)
    response = await client.get(
        f"{BASE}/{created['id']}/calendar-events", headers=auth_headers("u1")
    )
    assert response.status_code == 422
