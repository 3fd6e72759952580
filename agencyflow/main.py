"""FastAPI application factory.

    uvicorn agencyflow.main:app

Settings are read inside create_app(), so tests can set the environment
before the module is imported.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from agencyflow.api.v1 import api_router
from agencyflow.core.config import Settings, get_settings
from agencyflow.core.exception_handlers import register_exception_handlers
from agencyflow.core.lifespan import create_lifespan
from agencyflow.core.limiter import limiter
from agencyflow.middleware import RequestIDMiddleware, TenantContextMiddleware


def _cors_origins(settings: Settings) -> list[str]:
    return [origin.strip() for origin in settings.allowed_origins.split(",") if origin.strip()]


def _install_middleware(app: FastAPI, settings: Settings) -> None:
    # Starlette runs the last-added middleware first: request id, tenant, CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TenantContextMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)


def create_app() -> FastAPI:
    """Build the agencyflow API: /api/v1 routes, error mapping, rate limits, middleware."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    register_exception_handlers(app)
    _install_middleware(app, settings)
    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
