"""ClientService tests: create validation, newest-first listing, tenant scoping."""

from datetime import date
from decimal import Decimal

import pytest

from agencyflow.application.dtos.client import ClientCreate
from agencyflow.domain.exceptions import ResourceNotFoundException, ValidationException


class TestCreateClient:
    async def test_creates_client_owned_by_actor(self, client_service, users) -> None:
        client = await client_service.create_client(
            users["u2"],
            ClientCreate(
                name="  Harbor Coffee launch  ",
                client_name="Harbor Coffee",
                budget=Decimal("12500.00"),
                start_date=date(2026, 11, 1),
                deadline=date(2027, 1, 31),
                team=["u1", "u4", "u1"],
            ),
        )
        assert client.name == "Harbor Coffee launch"
        assert client.status == "active"
        assert client.progress == 0
        assert client.team == ["u1", "u4"]
        assert client.created_by == "u2"
        assert client.tenant_id == users["u2"].tenant_id

    async def test_blank_name_rejected(self, client_service, users) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await client_service.create_client(users["u1"], ClientCreate(name="   "))
        assert exc_info.value.details == {"field": "name"}

    async def test_unknown_status_rejected(self, client_service, users) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await client_service.create_client(
                users["u1"], ClientCreate(name="Acme", status="archived")
            )
        assert exc_info.value.details == {"field": "status"}

    @pytest.mark.parametrize("progress", [-1, 101])
    async def test_progress_out_of_range_rejected(
        self, client_service, users, progress
    ) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await client_service.create_client(
                users["u1"], ClientCreate(name="Acme", progress=progress)
            )
        assert exc_info.value.details == {"field": "progress"}

    async def test_deadline_before_start_rejected(self, client_service, users) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await client_service.create_client(
                users["u1"],
                ClientCreate(
                    name="Acme",
                    start_date=date(2026, 12, 1),
                    deadline=date(2026, 11, 1),
                ),
            )
        assert exc_info.value.details == {"field": "deadline"}

    async def test_team_member_of_other_tenant_rejected(
        self, client_service, client_repo, users
    ) -> None:
        with pytest.raises(ValidationException) as exc_info:
            await client_service.create_client(
                users["u1"], ClientCreate(name="Acme", team=["u1", "outsider"])
            )
        assert exc_info.value.details == {"field": "team"}
        assert client_repo.clients == {}


class TestReadClients:
    async def test_list_is_newest_first(self, client_service, users) -> None:
        for name in ("First", "Second", "Third"):
            await client_service.create_client(users["u1"], ClientCreate(name=name))

        clients = await client_service.list_clients(users["u3"])

        assert [c.name for c in clients] == ["Third", "Second", "First"]

    async def test_list_excludes_other_tenants(
        self, client_service, client_repo, users, acme_client
    ) -> None:
        await client_repo.create(
            "tenant-globex", ClientCreate(name="Globex launch"), created_by="outsider"
        )
        clients = await client_service.list_clients(users["u1"])
        assert [c.id for c in clients] == [acme_client.id]

    async def test_get_returns_client(self, client_service, users, acme_client) -> None:
        client = await client_service.get_client(users["u5"], acme_client.id)
        assert client == acme_client

    async def test_get_missing_raises_not_found(self, client_service, users) -> None:
        with pytest.raises(ResourceNotFoundException):
            await client_service.get_client(users["u1"], "missing")

    async def test_get_other_tenant_client_is_not_found(
        self, client_service, users, acme_client
    ) -> None:
        with pytest.raises(ResourceNotFoundException):
            await client_service.get_client(users["outsider"], acme_client.id)
