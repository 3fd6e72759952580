"""Application lifespan: startup and shutdown.

Wiring only: logging on startup, SQL engine dispose on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from agencyflow.core.config import get_settings
from agencyflow.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, yield, then dispose the database engine."""
    setup_logging()
    settings = get_settings()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)

    yield

    from agencyflow.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
    logger.info("Stopped %s", settings.app_name)
