"""Unit tests for the Zippopotam ZIP centroid provider."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from rep_finder.lib.geocoder.base import GeocodingProviderError, ZipCentroid
from rep_finder.lib.geocoder.zippopotam import ZippopotamGeocoder, validate_zip_code

_PAYLOAD = {
    "post code": "94612",
    "country": "United States",
    "places": [
        {
            "place name": "Oakland",
            "longitude": "-122.2705",
            "latitude": "37.8085",
            "state": "California",
            "state abbreviation": "CA",
        }
    ],
}


def _response(status_code: int = 200, payload: object = None) -> MagicMock:
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = payload
    mock_response.raise_for_status = MagicMock()
    return mock_response


class TestValidateZipCode:
    """Tests for validate_zip_code."""

    def test_strips_whitespace(self) -> None:
        assert validate_zip_code(" 10001 ") == "10001"

    @pytest.mark.parametrize("value", ["", "1234", "123456", "abcde", "10001-1234"])
    def test_rejects_malformed(self, value: str) -> None:
        with pytest.raises(ValueError, match="5 digits"):
            validate_zip_code(value)


class TestZippopotamParsing:
    """Tests for response parsing."""

    def setup_method(self) -> None:
        self.geocoder = ZippopotamGeocoder()

    def test_first_place(self) -> None:
        result = self.geocoder._parse_response("94612", _PAYLOAD)
        assert result == ZipCentroid(
            zip_code="94612", latitude=37.8085, longitude=-122.2705, place_name="Oakland", state="CA"
        )

    def test_no_places(self) -> None:
        assert self.geocoder._parse_response("94612", {"places": []}) is None
        assert self.geocoder._parse_response("94612", {}) is None

    def test_missing_coordinates(self) -> None:
        assert self.geocoder._parse_response("94612", {"places": [{"place name": "Oakland"}]}) is None

    def test_unparseable_coordinates(self) -> None:
        with pytest.raises(GeocodingProviderError, match="parse"):
            self.geocoder._parse_response("94612", {"places": [{"latitude": "north", "longitude": "-1"}]})

    @pytest.mark.parametrize("places", [["x"], {"a": 1}, [None]])
    def test_malformed_places_raises_provider_error(self, places: object) -> None:
        with pytest.raises(GeocodingProviderError, match="parse"):
            self.geocoder._parse_response("94612", {"places": places})


class TestZippopotamGeocoder:
    """Tests for geocode_zip over a mocked transport."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        geocoder = ZippopotamGeocoder(base_url="https://zip.test/")
        with patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=_response(payload=_PAYLOAD)) as get:
            result = await geocoder.geocode_zip("94612")

        assert result is not None
        assert result.latitude == 37.8085
        get.assert_awaited_once_with("https://zip.test/us/94612")

    @pytest.mark.asyncio
    async def test_not_found_returns_none(self) -> None:
        with patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=_response(status_code=404)):
            assert await ZippopotamGeocoder().geocode_zip("00000") is None

    @pytest.mark.asyncio
    async def test_malformed_zip_raises_value_error(self) -> None:
        with pytest.raises(ValueError):
            await ZippopotamGeocoder().geocode_zip("ABCDE")

    @pytest.mark.asyncio
    async def test_server_error_raises_provider_error(self) -> None:
        request = httpx.Request("GET", "https://api.zippopotam.us/us/10001")
        response = httpx.Response(status_code=503, request=request)
        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=response),
            pytest.raises(GeocodingProviderError) as exc_info,
        ):
            await ZippopotamGeocoder().geocode_zip("10001")

        assert exc_info.value.provider_name == "zippopotam"
        assert exc_info.value.status_code == 503
        assert "ZIP lookup failed: 503" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_raises_provider_error(self) -> None:
        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock, side_effect=httpx.TimeoutException("slow")),
            pytest.raises(GeocodingProviderError, match="timed out"),
        ):
            await ZippopotamGeocoder().geocode_zip("10001")

    @pytest.mark.asyncio
    async def test_connection_error_raises_provider_error(self) -> None:
        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock, side_effect=httpx.ConnectError("refused")),
            pytest.raises(GeocodingProviderError, match="Connection"),
        ):
            await ZippopotamGeocoder().geocode_zip("10001")

    @pytest.mark.asyncio
    async def test_malformed_places_payload_raises_provider_error(self) -> None:
        payload = {"places": ["x"]}
        with (
            patch("httpx.AsyncClient.get", new_callable=AsyncMock, return_value=_response(payload=payload)),
            pytest.raises(GeocodingProviderError) as exc_info,
        ):
            await ZippopotamGeocoder().geocode_zip("94612")

        assert exc_info.value.provider_name == "zippopotam"


class TestZipCentroid:
    """Coordinate range validation."""

    def test_out_of_range_latitude(self) -> None:
        with pytest.raises(ValueError, match="latitude"):
            ZipCentroid(zip_code="00000", latitude=91.0, longitude=0.0)
