"""ASGI middleware: request ID and tenant context."""

from agencyflow.middleware.request_id import RequestIDMiddleware
from agencyflow.middleware.tenant_context import TenantContextMiddleware

__all__ = ["RequestIDMiddleware", "TenantContextMiddleware"]
