"""Zippopotam.us ZIP-to-centroid provider.

Uses ``GET {base_url}/us/{zip}``, which answers 404 for unknown ZIP codes.
"""

import re

import httpx
from loguru import logger

from rep_finder.lib.geocoder.base import GeocodingProviderError, ZipCentroid

ZIPPOPOTAM_BASE_URL = "https://api.zippopotam.us"
DEFAULT_TIMEOUT = 10.0

_ZIP_RE = re.compile(r"^\d{5}$")


def validate_zip_code(zip_code: str) -> str:
    """Return the stripped ZIP code.

    Raises:
        ValueError: If the value is not exactly five digits.
    """
    stripped = zip_code.strip()
    if not _ZIP_RE.match(stripped):
        msg = "zip must be exactly 5 digits"
        raise ValueError(msg)
    return stripped


class ZippopotamGeocoder:
    """ZIP code centroid lookup via Zippopotam.us."""

    def __init__(self, base_url: str = ZIPPOPOTAM_BASE_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "zippopotam"

    async def geocode_zip(self, zip_code: str) -> ZipCentroid | None:
        """Resolve a ZIP code to its centroid.

        Args:
            zip_code: Five-digit U.S. ZIP code.

        Returns:
            ZipCentroid, or None if the service does not know the ZIP.

        Raises:
            ValueError: If the ZIP code is malformed.
            GeocodingProviderError: On transport or service errors.
        """
        zip_code = validate_zip_code(zip_code)
        url = f"{self._base_url}/us/{zip_code}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url)
            if response.status_code == httpx.codes.NOT_FOUND:
                return None
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            logger.warning("Zippopotam timeout for ZIP {}", zip_code)
            raise GeocodingProviderError(self.provider_name, "ZIP lookup timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning("Zippopotam HTTP error {}", e.response.status_code)
            raise GeocodingProviderError(
                self.provider_name,
                f"ZIP lookup failed: {e.response.status_code} {e.response.reason_phrase}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.warning("Zippopotam connection error: {}", e)
            raise GeocodingProviderError(self.provider_name, "Connection to ZIP service failed") from e
        except ValueError as e:
            logger.warning("Zippopotam returned non-JSON response for ZIP {}", zip_code)
            raise GeocodingProviderError(self.provider_name, "Invalid JSON from ZIP service") from e

        return self._parse_response(zip_code, data)

    def _parse_response(self, zip_code: str, data: dict) -> ZipCentroid | None:
        """Parse the first place of a Zippopotam response.

        Returns:
            ZipCentroid or None if the response has no usable coordinates.

        Raises:
            GeocodingProviderError: If ``places`` or its first entry has the wrong shape,
                or the coordinates are not numbers.
        """
        places = data.get("places") if isinstance(data, dict) else None
        if not places:
            return None

        try:
            if not isinstance(places, list) or not isinstance(places[0], dict):
                msg = "places must be a list of objects"
                raise TypeError(msg)
            place = places[0]
            lat = place.get("latitude")
            lon = place.get("longitude")
            if not lat or not lon:
                return None
            return ZipCentroid(
                zip_code=zip_code,
                latitude=float(lat),
                longitude=float(lon),
                place_name=place.get("place name"),
                state=place.get("state abbreviation"),
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to parse Zippopotam response: {}", e)
            raise GeocodingProviderError(self.provider_name, f"Failed to parse response: {e}") from e
