"""Tenant repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.application.dtos.tenant import TenantResult
from agencyflow.infrastructure.persistence.models.tenant import Tenant
from agencyflow.infrastructure.persistence.repositories.base import BaseRepository


def _tenant_to_result(t: Tenant) -> TenantResult:
    """Map ORM Tenant to application TenantResult."""
    return TenantResult(id=t.id, code=t.code, name=t.name, status=t.status)


class TenantRepository(BaseRepository[Tenant]):
    """Tenant repository. Implements ITenantRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Tenant)

    async def get_by_id(self, tenant_id: str) -> TenantResult | None:
        tenant = await self.get_model_by_id(tenant_id)
        return _tenant_to_result(tenant) if tenant else None
