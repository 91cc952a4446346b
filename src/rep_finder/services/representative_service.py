"""Representative lookup service.

Owns the process-wide officeholder index and orchestrates a ZIP lookup:
ZIP -> centroid -> Census geographies -> district keys -> representatives.

The index is read without locking. ``reload_index`` builds a complete new
index and publishes it with a single assignment, so readers see either the
old or the new index, never a partial one. Concurrent reloads are not
serialized; the last one to finish wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from rep_finder.lib.districts import find_geographies, resolve_districts
from rep_finder.lib.geocoder import (
    GeocodingProviderError,
    get_geographies_client,
    get_zip_geocoder,
    validate_zip_code,
)
from rep_finder.lib.roster import (
    OfficeholderIndex,
    ResolvedRepresentative,
    build_index,
    district_sort_key,
    load_roster,
    resolve_representatives,
)

if TYPE_CHECKING:
    from rep_finder.core.config import Settings

_index: OfficeholderIndex | None = None


class IndexNotLoadedError(RuntimeError):
    """Raised when the officeholder index is read before it has been built."""


class LookupErrorCategory(StrEnum):
    """Why a ZIP lookup stopped before resolving representatives."""

    INVALID_ZIP = "invalid_zip"
    ZIP_NOT_FOUND = "zip_not_found"
    ZIP_SERVICE_ERROR = "zip_service_error"
    GEOGRAPHY_SERVICE_ERROR = "geography_service_error"
    NO_GEOGRAPHIES = "no_geographies"
    NO_DISTRICTS = "no_districts"


class RepresentativeLookupError(Exception):
    """Raised when a ZIP lookup cannot be completed.

    Args:
        category: Failure category, used by the API to pick a status code.
        message: Human-readable error description.
    """

    def __init__(self, category: LookupErrorCategory, message: str) -> None:
        self.category = category
        self.message = message
        super().__init__(f"{category}: {message}")


@dataclass
class RepresentativeLookup:
    """Result of resolving a ZIP code to its House representatives."""

    zip_code: str
    latitude: float
    longitude: float
    districts: list[str] = field(default_factory=list)
    representatives: list[ResolvedRepresentative] = field(default_factory=list)


def get_index() -> OfficeholderIndex:
    """Return the current officeholder index.

    Raises:
        IndexNotLoadedError: If the index has not been loaded.
    """
    if _index is None:
        msg = "Officeholder index not loaded. Call reload_index() first."
        raise IndexNotLoadedError(msg)
    return _index


def set_index(index: OfficeholderIndex | None) -> None:
    """Publish an index (or clear it with None)."""
    global _index  # noqa: PLW0603
    _index = index


def reload_index(path: str | Path) -> int:
    """Load the roster and swap in a freshly built index.

    Args:
        path: Roster YAML path.

    Returns:
        Number of indexed House seats.

    Raises:
        RosterLoadError: If the roster cannot be loaded. The current index is left in place.
    """
    index = build_index(load_roster(path))
    set_index(index)
    logger.info("Indexed {} state/district entries from {}", len(index), path)
    return len(index)


async def lookup_representatives(zip_code: str, settings: Settings) -> RepresentativeLookup:
    """Resolve a ZIP code to its House representative(s).

    Args:
        zip_code: Five-digit ZIP code.
        settings: Application settings (provider endpoints, photo template).

    Returns:
        RepresentativeLookup with one representative (or missing marker) per district.

    Raises:
        RepresentativeLookupError: If validation or either upstream lookup fails.
    """
    try:
        zip_code = validate_zip_code(zip_code)
    except ValueError as e:
        raise RepresentativeLookupError(
            LookupErrorCategory.INVALID_ZIP, "zip query parameter required (5 digits)"
        ) from e

    try:
        centroid = await get_zip_geocoder(settings).geocode_zip(zip_code)
    except GeocodingProviderError as e:
        raise RepresentativeLookupError(LookupErrorCategory.ZIP_SERVICE_ERROR, e.message) from e
    if centroid is None:
        raise RepresentativeLookupError(
            LookupErrorCategory.ZIP_NOT_FOUND, f"Could not get lat/lon for ZIP {zip_code}"
        )

    try:
        response = await get_geographies_client(settings).lookup(centroid.latitude, centroid.longitude)
    except GeocodingProviderError as e:
        raise RepresentativeLookupError(LookupErrorCategory.GEOGRAPHY_SERVICE_ERROR, e.message) from e
    if find_geographies(response) is None:
        raise RepresentativeLookupError(LookupErrorCategory.NO_GEOGRAPHIES, "Census geographies missing")

    keys = resolve_districts(response)
    if not keys:
        raise RepresentativeLookupError(
            LookupErrorCategory.NO_DISTRICTS, "No congressional districts found for ZIP centroid"
        )

    districts = sorted(keys, key=district_sort_key)
    representatives = resolve_representatives(districts, get_index(), settings.photo_url_template)
    logger.debug("ZIP {} -> {}", zip_code, ", ".join(districts))

    return RepresentativeLookup(
        zip_code=zip_code,
        latitude=centroid.latitude,
        longitude=centroid.longitude,
        districts=districts,
        representatives=representatives,
    )
