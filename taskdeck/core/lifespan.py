"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring (logging, tracing, DB engine
dispose); no business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from taskdeck.core.config import get_settings
from taskdeck.infrastructure.persistence.database import dispose_engine, get_engine
from taskdeck.shared.telemetry.logging import setup_logging
from taskdeck.shared.telemetry.telemetry import (
    configure_tracing,
    instrument_app,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: logging, tracing (if enabled). Shutdown: span flush,
    SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    if settings.telemetry_enabled:
        configure_tracing(settings)
        instrument_app(app, get_engine())
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    shutdown_tracing()
    await dispose_engine()
