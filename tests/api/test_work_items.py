"""Work item routes: CRUD, the RACI workflow over HTTP, and error-code mapping."""

from httpx import AsyncClient

BASE = "/api/v1/departments/marketing/work-items"


async def _create(client: AsyncClient, auth_headers, **overrides) -> dict:
    body = {
        "title": "Holiday campaign",
        "responsible_user_id": "u1",
        "accountable_user_id": "u2",
        "consulted_user_ids": ["u4"],
        "informed_user_ids": ["u5"],
        "info_type": "campaign",
        "priority": "high",
    }
    body.update(overrides)
    response = await client.post(BASE, json=body, headers=auth_headers("admin"))
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_returns_caller_view(client: AsyncClient, auth_headers) -> None:
    data = await _create(client, auth_headers)
    assert data["status"] == "pending"
    assert data["department"] == "marketing"
    assert data["created_by"] == "admin"
    assert data["roles"] == []
    assert data["primary_action"] == "view"


async def test_create_validation_error_returns_400(client: AsyncClient, auth_headers) -> None:
    response = await client.post(
        BASE,
        json={"title": "X", "responsible_user_id": "u1", "priority": "urgent"},
        headers=auth_headers("admin"),
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"] == {"field": "priority"}


async def test_create_missing_fields_returns_422(client: AsyncClient, auth_headers) -> None:
    response = await client.post(BASE, json={"title": "X"}, headers=auth_headers("admin"))
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_unknown_department_returns_400(client: AsyncClient, auth_headers) -> None:
    response = await client.get(
        "/api/v1/departments/finance/work-items", headers=auth_headers("u1")
    )
    assert response.status_code == 400


async def test_get_shows_roles_per_caller(client: AsyncClient, auth_headers) -> None:
    item = await _create(client, auth_headers)

    r1 = (await client.get(f"{BASE}/{item['id']}", headers=auth_headers("u1"))).json()
    assert r1["roles"] == ["responsible"]
    assert r1["primary_action"] == "complete"
    assert r1["allowed_operations"] == ["complete"]

    r4 = (await client.get(f"{BASE}/{item['id']}", headers=auth_headers("u4"))).json()
    assert r4["primary_action"] == "consult"


async def test_get_missing_returns_404(client: AsyncClient, auth_headers) -> None:
    response = await client.get(f"{BASE}/missing", headers=auth_headers("u1"))
    assert response.status_code == 404
    assert response.json()["details"]["resource_type"] == "work_item"


async def test_workflow_over_http(
    client: AsyncClient, auth_headers, notification_repo
) -> None:
    """complete -> request-correction -> complete -> approve through the API."""
    item = await _create(client, auth_headers)
    url = f"{BASE}/{item['id']}"

    r = await client.post(f"{url}/complete", json={"content": "done"}, headers=auth_headers("u1"))
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["operation"] == "complete"
    assert data["item"]["status"] == "in_review"
    assert data["item"]["completion_content"] == "done"
    assert data["notifications_sent"] == 2
    assert {n["notification_type"] for n in data["notifications"]} == {
        "task_completed",
        "task_updated",
    }

    r = await client.post(
        f"{url}/request-correction", json={"feedback": "fix X"}, headers=auth_headers("u2")
    )
    assert r.status_code == 200
    assert r.json()["item"]["status"] == "correction_needed"
    assert r.json()["item"]["correction_feedback"] == "fix X"

    r = await client.post(f"{url}/complete", json={"content": "fixed"}, headers=auth_headers("u1"))
    assert r.json()["item"]["completion_content"] == "fixed"

    r = await client.post(f"{url}/approve", headers=auth_headers("u2"))
    assert r.status_code == 200
    assert r.json()["item"]["status"] == "completed"
    assert r.json()["item"]["primary_action"] == "view"

    r = await client.post(f"{url}/approve", headers=auth_headers("u2"))
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_TRANSITION"

    assert [n.notification_type for n in notification_repo.for_user("u1")] == [
        "correction_requested",
        "task_approved",
    ]


async def test_unrelated_user_complete_returns_403(
    client: AsyncClient, auth_headers, notification_repo
) -> None:
    item = await _create(client, auth_headers)
    r = await client.post(
        f"{BASE}/{item['id']}/complete", json={"content": "x"}, headers=auth_headers("u3")
    )
    assert r.status_code == 403
    assert r.json()["details"]["required_role"] == "responsible"
    assert notification_repo.rows == []


async def test_blank_content_returns_400(client: AsyncClient, auth_headers) -> None:
    item = await _create(client, auth_headers)
    r = await client.post(
        f"{BASE}/{item['id']}/complete", json={"content": "   "}, headers=auth_headers("u1")
    )
    assert r.status_code == 400
    assert r.json()["details"] == {"field": "content"}


async def test_consult_keeps_status(client: AsyncClient, auth_headers) -> None:
    item = await _create(client, auth_headers)
    r = await client.post(
        f"{BASE}/{item['id']}/consult", json={"content": "advice"}, headers=auth_headers("u4")
    )
    assert r.status_code == 200
    assert r.json()["item"]["status"] == "pending"
    assert r.json()["item"]["consulted_content"] == "advice"


async def test_conflict_returns_409(
    client: AsyncClient, auth_headers, work_item_repo
) -> None:
    item = await _create(client, auth_headers)
    work_item_repo.concurrent_status[item["id"]] = "in_review"
    r = await client.post(
        f"{BASE}/{item['id']}/complete", json={"content": "done"}, headers=auth_headers("u1")
    )
    assert r.status_code == 409
    assert r.json()["error"] == "TRANSITION_CONFLICT"


async def test_notification_outage_does_not_fail_transition(
    client: AsyncClient, auth_headers, notification_repo
) -> None:
    item = await _create(client, auth_headers)
    notification_repo.fail = True
    r = await client.post(
        f"{BASE}/{item['id']}/complete", json={"content": "done"}, headers=auth_headers("u1")
    )
    assert r.status_code == 200
    assert r.json()["item"]["status"] == "in_review"
    assert r.json()["notifications_sent"] == 0


async def test_list_and_filter(client: AsyncClient, auth_headers) -> None:
    first = await _create(client, auth_headers, title="First")
    await _create(client, auth_headers, title="Second", info_type="task")

    r = await client.get(BASE, params={"info_type": "campaign"}, headers=auth_headers("u3"))
    assert r.status_code == 200
    assert [i["id"] for i in r.json()] == [first["id"]]


async def test_list_mine(client: AsyncClient, auth_headers) -> None:
    item = await _create(client, auth_headers)
    r = await client.get(
        "/api/v1/work-items/mine", params={"role": "informed"}, headers=auth_headers("u5")
    )
    assert r.status_code == 200
    assert [i["id"] for i in r.json()] == [item["id"]]
    assert r.json()[0]["roles"] == ["informed"]


async def test_patch_reassigns_and_clears_accountable(
    client: AsyncClient, auth_headers
) -> None:
    item = await _create(client, auth_headers)
    r = await client.patch(
        f"{BASE}/{item['id']}",
        json={"accountable_user_id": None, "title": "Renamed"},
        headers=auth_headers("admin"),
    )
    assert r.status_code == 200, r.text
    assert r.json()["accountable_user_id"] is None
    assert r.json()["title"] == "Renamed"
    assert r.json()["responsible_user_id"] == "u1"


async def test_patch_by_participant_returns_403(client: AsyncClient, auth_headers) -> None:
    item = await _create(client, auth_headers)
    r = await client.patch(
        f"{BASE}/{item['id']}", json={"title": "Mine now"}, headers=auth_headers("u1")
    )
    assert r.status_code == 403
