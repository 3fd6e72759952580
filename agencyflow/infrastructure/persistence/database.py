"""Async engine, request-scoped sessions and the declarative Base.

The engine is built on first use so importing models (Alembic, tests) never
requires DATABASE_URL. Every session is bound to the tenant of the current
request: with RLS enabled, `app.current_tenant_id` is set transaction-locally
and the policies in the migrations filter every table by it.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from agencyflow.core.config import Settings, get_settings
from agencyflow.core.tenant_context import get_tenant_id, is_valid_tenant_id_format

logger = logging.getLogger(__name__)

engine: AsyncEngine | None = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None

_DRIVER_PREFIXES = ("postgresql://", "postgres://")


class Base(DeclarativeBase):
    """Declarative base for every agencyflow table."""


def _normalize_database_url(url: str) -> str:
    """Force the asyncpg driver for plain postgresql:// URLs."""
    for prefix in _DRIVER_PREFIXES:
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix) :]
    return url


def _engine_options(settings: Settings) -> dict[str, Any]:
    options: dict[str, Any] = {
        "echo": settings.database_echo,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
        "pool_size": settings.db_pool_size or 10,
        "max_overflow": settings.db_max_overflow or 20,
    }
    if "asyncpg" in _normalize_database_url(settings.database_url):
        options["connect_args"] = {
            "command_timeout": settings.db_command_timeout or 60
        }
    return options


def _ensure_engine() -> None:
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    engine = create_async_engine(
        _normalize_database_url(settings.database_url), **_engine_options(settings)
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine, expire_on_commit=False, autoflush=False
    )
    logger.info("Database engine created")


async def bind_tenant(session: AsyncSession, tenant_id: str | None = None) -> None:
    """Scope the session's current transaction to a tenant for RLS.

    Defaults to the tenant of the current request. set_config(..., true)
    behaves like SET LOCAL and lets the value travel as a bound parameter.
    """
    if not get_settings().rls_enabled:
        return
    tenant_id = tenant_id or get_tenant_id()
    if not tenant_id:
        return
    if not is_valid_tenant_id_format(tenant_id):
        logger.warning("Not binding session to malformed tenant id (length=%d)", len(tenant_id))
        return
    await session.execute(
        text("SELECT set_config('app.current_tenant_id', :tenant_id, true)"),
        {"tenant_id": tenant_id},
    )


@asynccontextmanager
async def tenant_session(*, transactional: bool) -> AsyncIterator[AsyncSession]:
    """Open a session bound to the request tenant; commit on exit when transactional."""
    _ensure_engine()
    assert AsyncSessionLocal is not None
    async with AsyncSessionLocal() as session:
        if not transactional:
            await bind_tenant(session)
            yield session
            return
        async with session.begin():
            await bind_tenant(session)
            yield session


async def get_db() -> AsyncIterator[AsyncSession]:
    """Read-only session dependency. Never commits."""
    async with tenant_session(transactional=False) as session:
        yield session


async def get_db_transactional() -> AsyncIterator[AsyncSession]:
    """Write session dependency: one transaction per request.

    A workflow transition (conditional task update plus the notification
    savepoint) commits or rolls back as a unit.
    """
    async with tenant_session(transactional=True) as session:
        yield session


async def dispose_engine() -> None:
    """Close pooled connections (app shutdown, test teardown)."""
    global engine, AsyncSessionLocal
    if engine is None:
        return
    await engine.dispose()
    logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
