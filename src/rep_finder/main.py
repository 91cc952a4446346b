"""FastAPI application factory.

Creates the FastAPI app with lifespan management and OpenAPI metadata.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from rep_finder.core.config import get_settings
from rep_finder.core.logging import setup_logging
from rep_finder.lib.roster import RosterLoadError
from rep_finder.services.representative_service import reload_index, set_index


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifecycle: build the officeholder index on startup.

    A missing or unreadable roster aborts startup.
    """
    settings = get_settings()
    setup_logging(settings.log_level, log_dir=settings.log_dir, json_logs=settings.log_json)

    try:
        reload_index(settings.legislators_file)
    except RosterLoadError as e:
        logger.critical("Cannot start without a roster: {}", e)
        raise

    yield

    set_index(None)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Rep Finder API",
        description="Find the U.S. House representative(s) for a ZIP code",
        version="0.1.0",
        lifespan=lifespan,
    )

    from rep_finder.api.router import create_router, setup_middleware

    setup_middleware(app, settings)
    app.include_router(create_router(settings))

    return app
