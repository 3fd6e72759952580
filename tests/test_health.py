"""Smoke tests for health endpoints and app wiring."""

from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from agencyflow.infrastructure.persistence.database import get_db
from agencyflow.main import app


class _UnreachableSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError())


class _HealthySession:
    async def execute(self, *args, **kwargs):
        return None


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json().get("status") == "ok"


async def test_health_echoes_request_id(client: AsyncClient) -> None:
    """A safe client X-Request-ID is echoed; an unsafe one is replaced."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"

    response = await client.get(
        "/api/v1/health", headers={"X-Request-ID": "bad id with spaces"}
    )
    assert response.headers["X-Request-ID"] != "bad id with spaces"
    assert len(response.headers["X-Request-ID"]) == 36


async def test_ready_returns_ok_when_database_answers(client: AsyncClient) -> None:
    app.dependency_overrides[get_db] = lambda: _HealthySession()
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


async def test_ready_returns_503_when_database_unreachable(client: AsyncClient) -> None:
    """GET /api/v1/health/ready maps a database failure to SERVICE_UNAVAILABLE."""
    app.dependency_overrides[get_db] = lambda: _UnreachableSession()
    response = await client.get("/api/v1/health/ready", headers={"X-Request-ID": "ready-1"})
    assert response.status_code == 503
    body = response.json()
    assert body["error"] == "SERVICE_UNAVAILABLE"
    assert body["details"]["service"] == "database"
    assert body["request_id"] == "ready-1"
