"""Authentication dependencies: the acting user from the bearer token.

Every workflow operation receives this user explicitly as its actor.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from agencyflow.application.dtos.user import UserResult
from agencyflow.domain.exceptions import AuthenticationException, AuthorizationException
from agencyflow.infrastructure.persistence.repositories import UserRepository
from agencyflow.infrastructure.security.jwt import verify_token

from .db import get_user_repo
from .tenant import get_tenant_id

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
) -> UserResult | None:
    """Return current user from JWT if present and valid; else None."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
    except ValueError:
        return None
    user = await user_repo.get_by_id_and_tenant(payload["sub"], payload["tenant_id"])
    if not user or not user.is_active:
        return None
    return user


async def get_current_user(
    current_user: Annotated[UserResult | None, Depends(get_current_user_optional)],
) -> UserResult:
    """Return current user from JWT; raise AuthenticationException (401) if missing or invalid."""
    if current_user is None:
        raise AuthenticationException("Not authenticated")
    return current_user


async def get_actor(
    current_user: Annotated[UserResult, Depends(get_current_user)],
    tenant_id: Annotated[str, Depends(get_tenant_id)],
) -> UserResult:
    """Current user, checked against the X-Tenant-ID header (403 on mismatch)."""
    if current_user.tenant_id != tenant_id:
        raise AuthorizationException(resource="tenant", action="access")
    return current_user
