"""Client operations: list (newest first), get, create."""

from __future__ import annotations

from agencyflow.application.dtos.client import ClientCreate, ClientResult
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.interfaces.repositories import (
    IClientRepository,
    IUserRepository,
)
from agencyflow.application.use_cases.work_items.work_item_operations import (
    _enum_value,
    _unique_ids,
)
from agencyflow.domain.enums import ClientStatus
from agencyflow.domain.exceptions import ResourceNotFoundException, ValidationException
from agencyflow.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class ClientService:
    """Tenant-scoped client queries and creation."""

    def __init__(
        self,
        client_repo: IClientRepository,
        user_repo: IUserRepository,
    ) -> None:
        self.client_repo = client_repo
        self.user_repo = user_repo

    async def list_clients(
        self, actor: UserResult, skip: int = 0, limit: int = 100
    ) -> list[ClientResult]:
        return await self.client_repo.list_by_tenant(
            actor.tenant_id, skip=skip, limit=limit
        )

    async def get_client(self, actor: UserResult, client_id: str) -> ClientResult:
        client = await self.client_repo.get_by_id(actor.tenant_id, client_id)
        if client is None:
            raise ResourceNotFoundException("client", client_id)
        return client

    async def create_client(self, actor: UserResult, data: ClientCreate) -> ClientResult:
        """Create a client in the actor's tenant.

        Team members must be users of the tenant. The deadline may not precede
        the start date.
        """
        name = (data.name or "").strip()
        if not name:
            raise ValidationException("name must not be empty", field="name")
        data.name = name
        data.status = _enum_value(ClientStatus, data.status, "status")
        if not 0 <= data.progress <= 100:
            raise ValidationException(
                "progress must be between 0 and 100", field="progress"
            )
        if data.budget is not None and data.budget < 0:
            raise ValidationException("budget must not be negative", field="budget")
        if data.start_date and data.deadline and data.deadline < data.start_date:
            raise ValidationException(
                "deadline must not be before start_date", field="deadline"
            )
        data.team = _unique_ids(data.team)
        existing = await self.user_repo.get_existing_ids(actor.tenant_id, data.team)
        missing = sorted(set(data.team) - existing)
        if missing:
            raise ValidationException(
                f"Unknown user(s) in team: {', '.join(missing)}", field="team"
            )

        client = await self.client_repo.create(actor.tenant_id, data, created_by=actor.id)
        logger.info(
            "Client created: tenant=%s client=%s by user=%s",
            actor.tenant_id,
            client.id,
            actor.id,
        )
        return client
