"""Tenant context middleware for RLS.

Puts the request's tenant id in a context variable so database sessions can
run SET LOCAL app.current_tenant_id. The tenant comes from the verified JWT,
falling back to the X-Tenant-ID header; auth dependencies check they agree.
"""

from __future__ import annotations

from typing import Callable

from agencyflow.core.config import get_settings
from agencyflow.core.tenant_context import current_tenant_id
from agencyflow.infrastructure.security.jwt import verify_token
from agencyflow.middleware.request_id import header_value


def tenant_id_from_scope(scope: dict) -> str | None:
    """Return tenant_id from a valid bearer token, else from the tenant header."""
    auth = header_value(scope, "Authorization")
    if auth and auth.startswith("Bearer "):
        try:
            return verify_token(auth[7:].strip())["tenant_id"]
        except ValueError:
            pass
    return header_value(scope, get_settings().tenant_header_name)


def TenantContextMiddleware(app: Callable) -> Callable:
    """Set tenant context (for RLS) before the route runs; reset it afterwards."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        token = current_tenant_id.set(tenant_id_from_scope(scope))
        try:
            await app(scope, receive, send)
        finally:
            current_tenant_id.reset(token)

    return asgi_app
