"""Representative lookup API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger

from rep_finder.core.config import Settings, get_settings
from rep_finder.schemas.representative import (
    Centroid,
    RepresentativeLookupResponse,
    RepresentativeResponse,
)
from rep_finder.services.representative_service import (
    IndexNotLoadedError,
    LookupErrorCategory,
    RepresentativeLookupError,
    lookup_representatives,
)

representatives_router = APIRouter(prefix="/representatives", tags=["representatives"])

_STATUS_BY_CATEGORY: dict[LookupErrorCategory, int] = {
    LookupErrorCategory.INVALID_ZIP: status.HTTP_400_BAD_REQUEST,
    LookupErrorCategory.ZIP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    LookupErrorCategory.ZIP_SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
    LookupErrorCategory.GEOGRAPHY_SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
    LookupErrorCategory.NO_GEOGRAPHIES: status.HTTP_404_NOT_FOUND,
    LookupErrorCategory.NO_DISTRICTS: status.HTTP_404_NOT_FOUND,
}


@representatives_router.get(
    "",
    response_model=RepresentativeLookupResponse,
)
async def representatives_by_zip(
    zip_code: str = Query("", alias="zip", description="Five-digit U.S. ZIP code"),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> RepresentativeLookupResponse:
    """Find the U.S. House representative(s) for a ZIP code.

    A ZIP spanning several districts returns every match. Districts with no
    indexed officeholder are returned with ``missing: true``.
    """
    try:
        result = await lookup_representatives(zip_code, settings)
    except RepresentativeLookupError as e:
        logger.info("ZIP lookup for {!r} failed: {}", zip_code, e)
        raise HTTPException(status_code=_STATUS_BY_CATEGORY[e.category], detail=e.message) from e
    except IndexNotLoadedError as e:
        logger.error("Representative index unavailable: {}", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Representative index is not loaded.",
        ) from e

    return RepresentativeLookupResponse(
        zip=result.zip_code,
        centroid=Centroid(lat=result.latitude, lon=result.longitude),
        districts=result.districts,
        representatives=[RepresentativeResponse.model_validate(r) for r in result.representatives],
    )
