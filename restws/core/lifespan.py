"""Application lifespan: startup and shutdown.

Single place for startup logic. Builds the RestService from settings
unless create_app() was given one; registration tables are then filled by
the hosting platform before traffic is served.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from restws.application.services.rest_service import RestService
from restws.core.config import get_settings
from restws.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, ensure app.state.rest_service exists, then yield."""
    settings = get_settings()
    setup_logging(settings)

    if getattr(app.state, "rest_service", None) is None:
        app.state.rest_service = RestService.from_settings(settings)
        logger.info("Created empty RestService (platform %s)", settings.platform_version)

    service: RestService = app.state.rest_service
    logger.info(
        "REST web services ready: %d resource(s), %d search handler(s)",
        len(service.get_resource_names()),
        len(service.get_all_search_handlers()),
    )

    yield

    logger.info("REST web services shut down")
