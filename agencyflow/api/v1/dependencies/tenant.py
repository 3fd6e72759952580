"""Tenant dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from agencyflow.application.dtos.tenant import TenantResult
from agencyflow.core.config import get_settings
from agencyflow.core.tenant_context import is_valid_tenant_id_format
from agencyflow.domain.exceptions import TenantNotFoundException
from agencyflow.infrastructure.persistence.repositories import TenantRepository

from .db import get_tenant_repo


async def get_tenant(
    request: Request,
    tenant_repo: Annotated[TenantRepository, Depends(get_tenant_repo)],
) -> TenantResult:
    """Resolve the tenant from the X-Tenant-ID header; it must exist and be active."""
    name = get_settings().tenant_header_name
    value = request.headers.get(name)
    if not value:
        raise HTTPException(
            status_code=400,
            detail=f"Missing required header: {name}",
        )
    if not is_valid_tenant_id_format(value):
        raise HTTPException(
            status_code=400,
            detail="Invalid tenant ID format (use alphanumeric, hyphen, underscore; max 64 characters)",
        )
    tenant = await tenant_repo.get_by_id(value)
    if tenant is None or not tenant.is_active:
        raise TenantNotFoundException(value)
    return tenant


async def get_tenant_id(
    tenant: Annotated[TenantResult, Depends(get_tenant)],
) -> str:
    """Validated tenant id from the X-Tenant-ID header."""
    return tenant.id
