"""Geocoder library: the two upstream lookups behind a ZIP resolution.

Public API:
    - ZippopotamGeocoder: ZIP code -> centroid (Zippopotam.us)
    - CensusGeographiesClient: centroid -> geographies (US Census Bureau)
    - ZipCentroid: Centroid result dataclass
    - GeocodingProviderError: Transport/service failure from either provider
    - validate_zip_code: Five-digit ZIP validation
    - get_zip_geocoder / get_geographies_client: Build providers from settings
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rep_finder.lib.geocoder.base import GeocodingProviderError, ZipCentroid
from rep_finder.lib.geocoder.census import CensusGeographiesClient
from rep_finder.lib.geocoder.zippopotam import ZippopotamGeocoder, validate_zip_code

if TYPE_CHECKING:
    from rep_finder.core.config import Settings


def get_zip_geocoder(settings: Settings) -> ZippopotamGeocoder:
    """Build the ZIP centroid provider from settings."""
    return ZippopotamGeocoder(base_url=settings.zip_geocoder_base_url, timeout=settings.zip_geocoder_timeout)


def get_geographies_client(settings: Settings) -> CensusGeographiesClient:
    """Build the Census geographies client from settings."""
    return CensusGeographiesClient(
        url=settings.census_geographies_url,
        benchmark=settings.census_benchmark,
        vintage=settings.census_vintage,
        timeout=settings.census_timeout,
    )


__all__ = [
    "CensusGeographiesClient",
    "GeocodingProviderError",
    "ZipCentroid",
    "ZippopotamGeocoder",
    "get_geographies_client",
    "get_zip_geocoder",
    "validate_zip_code",
]
