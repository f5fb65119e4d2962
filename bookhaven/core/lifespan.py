"""Application lifespan: startup and shutdown.

Creates tables from ORM metadata when enabled and disposes the SQL engine
on exit. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from bookhaven.core.config import get_settings
from bookhaven.infrastructure.persistence import database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the engine."""
    settings = get_settings()
    logger.info("Starting %s %s", settings.app_name, settings.app_version)
    if settings.create_tables_on_startup:
        await database.init_models()

    yield

    await database.dispose_engine()
    logger.info("Database engine disposed")
