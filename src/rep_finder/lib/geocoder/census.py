"""US Census Bureau coordinates-to-geographies provider.

Uses the Census Geocoding API (https://geocoding.geo.census.gov/geocoder/)
``geographies/coordinates`` endpoint to find the boundaries enclosing a point.
"""

import httpx
from loguru import logger

from rep_finder.lib.geocoder.base import GeocodingProviderError

CENSUS_GEOGRAPHIES_URL = "https://geocoding.geo.census.gov/geocoder/geographies/coordinates"
DEFAULT_BENCHMARK = "Public_AR_Current"
DEFAULT_VINTAGE = "Current_Current"
DEFAULT_TIMEOUT = 30.0


class CensusGeographiesClient:
    """US Census Bureau geographies lookup for a coordinate pair."""

    def __init__(
        self,
        url: str = CENSUS_GEOGRAPHIES_URL,
        benchmark: str = DEFAULT_BENCHMARK,
        vintage: str = DEFAULT_VINTAGE,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._url = url
        self._benchmark = benchmark
        self._vintage = vintage
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "census"

    async def lookup(self, latitude: float, longitude: float) -> dict:
        """Fetch the geographies enclosing a point.

        Args:
            latitude: WGS84 latitude (sent as ``y``).
            longitude: WGS84 longitude (sent as ``x``).

        Returns:
            The parsed JSON response.

        Raises:
            GeocodingProviderError: On transport or service errors (timeout, HTTP error, connection, bad JSON).
        """
        params = {
            "x": longitude,
            "y": latitude,
            "benchmark": self._benchmark,
            "vintage": self._vintage,
            "format": "json",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._url, params=params)
                response.raise_for_status()

            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("Census geographies timeout for ({}, {})", latitude, longitude)
            raise GeocodingProviderError("census", "Geographies request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning("Census geographies HTTP error {}", e.response.status_code)
            raise GeocodingProviderError(
                "census",
                f"Census coordinates lookup failed: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.warning("Census geographies connection error")
            raise GeocodingProviderError("census", "Connection to geocoding provider failed") from e
        except ValueError as e:
            logger.warning("Census geographies returned non-JSON response")
            raise GeocodingProviderError("census", "Invalid JSON response") from e

        if not isinstance(data, dict):
            raise GeocodingProviderError("census", f"Unexpected response type {type(data).__name__}")
        return data
