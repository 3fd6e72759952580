"""Client repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.application.dtos.client import ClientCreate, ClientResult
from agencyflow.infrastructure.persistence.models.client import Client
from agencyflow.infrastructure.persistence.repositories.base import BaseRepository


def _to_result(c: Client) -> ClientResult:
    return ClientResult(
        id=c.id,
        tenant_id=c.tenant_id,
        name=c.name,
        client_name=c.client_name,
        description=c.description,
        type=c.type,
        status=c.status,
        phase=c.phase,
        progress=c.progress,
        budget=c.budget,
        start_date=c.start_date,
        deadline=c.deadline,
        team=list(c.team or []),
        created_by=c.created_by,
        created_at=c.created_at,
        updated_at=c.updated_at,
    )


class ClientRepository(BaseRepository[Client]):
    """Client repository. Implements IClientRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Client)

    async def get_by_id(self, tenant_id: str, client_id: str) -> ClientResult | None:
        client = await self.get_scoped(tenant_id, client_id)
        return _to_result(client) if client else None

    async def list_by_tenant(
        self, tenant_id: str, skip: int = 0, limit: int = 100
    ) -> list[ClientResult]:
        result = await self.db.execute(
            select(Client)
            .where(Client.tenant_id == tenant_id)
            .order_by(Client.created_at.desc(), Client.id)
            .offset(skip)
            .limit(limit)
        )
        return [_to_result(c) for c in result.scalars().all()]

    async def create(
        self, tenant_id: str, data: ClientCreate, created_by: str
    ) -> ClientResult:
        client = Client(
            tenant_id=tenant_id,
            name=data.name,
            client_name=data.client_name,
            description=data.description,
            type=data.type,
            status=data.status,
            phase=data.phase,
            progress=data.progress,
            budget=data.budget,
            start_date=data.start_date,
            deadline=data.deadline,
            team=list(data.team),
            created_by=created_by,
        )
        client = await self.add(client)
        return _to_result(client)
