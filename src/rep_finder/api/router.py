"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rep_finder.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from rep_finder.api.v1.admin import admin_router
    from rep_finder.api.v1.representatives import representatives_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(representatives_router)
    root_router.include_router(admin_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
