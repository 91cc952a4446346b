"""Admin and health endpoints: roster reload, GET /health."""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from rep_finder.core.config import Settings, get_settings
from rep_finder.lib.roster import RosterLoadError
from rep_finder.schemas.representative import HealthResponse, ReloadResponse
from rep_finder.services.representative_service import IndexNotLoadedError, get_index, reload_index

admin_router = APIRouter(tags=["admin"])


@admin_router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint reporting the indexed seat count."""
    try:
        entries = len(get_index())
    except IndexNotLoadedError:
        return HealthResponse(status="loading", entries=0)
    return HealthResponse(status="healthy", entries=entries)


@admin_router.post("/admin/reload", response_model=ReloadResponse)
async def reload_roster(settings: Settings = Depends(get_settings)) -> ReloadResponse:  # noqa: B008
    """Re-read the roster file and swap in a fresh officeholder index.

    On failure the previous index stays in service.
    """
    if not settings.admin_reload_enabled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    try:
        entries = reload_index(settings.legislators_file)
    except RosterLoadError as e:
        logger.error("Roster reload failed: {}", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e
    return ReloadResponse(ok=True, entries=entries)
