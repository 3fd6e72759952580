"""Request tenant scope: the current tenant id and its accepted format.

TenantContextMiddleware stores the id; database sessions copy it into
app.current_tenant_id so row-level security policies filter rows. Log
records are tagged with it too.
"""

import re
from contextvars import ContextVar

TENANT_ID_MAX_LENGTH = 64
# CUID/UUID-style ids only.
_TENANT_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,%d}" % TENANT_ID_MAX_LENGTH)

current_tenant_id: ContextVar[str | None] = ContextVar(
    "current_tenant_id", default=None
)


def get_tenant_id() -> str | None:
    """Return the tenant id of the current request, if any."""
    return current_tenant_id.get()


def is_valid_tenant_id_format(value: str | None) -> bool:
    """True when value is an acceptable tenant id (header value, RLS binding)."""
    return bool(value) and _TENANT_ID_PATTERN.fullmatch(value) is not None
