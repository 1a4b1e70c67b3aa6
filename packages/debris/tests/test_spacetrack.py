"""
Unit tests for spacetrack.py - Space-Track TLE connector

Tests cover:
- Mean-motion altitude approximation
- Altitude band filtering
- Authentication and TLE retrieval against a mocked transport
"""

import httpx
import pytest
from numpy.testing import assert_allclose

from debris.data.spacetrack import (
    SpaceTrackConnector,
    altitude_from_mean_motion,
    filter_by_altitude,
)

# ISS-like (~15.5 rev/day, ~420 km) and GPS-like (~2.0 rev/day, ~20200 km)
_ISS = {"OBJECT_NAME": "ISS (ZARYA)", "MEAN_MOTION": "15.50"}
_GPS = {"OBJECT_NAME": "GPS BIIR-2", "MEAN_MOTION": "2.0056"}
_BROKEN = {"OBJECT_NAME": "UNKNOWN", "MEAN_MOTION": None}


class TestAltitudeFromMeanMotion:
    """Tests for altitude_from_mean_motion function."""

    def test_leo_altitude(self):
        altitude = altitude_from_mean_motion(15.5)

        assert 380 < altitude < 460

    def test_meo_altitude(self):
        altitude = altitude_from_mean_motion(2.0056)

        assert 20000 < altitude < 20400

    def test_geostationary(self):
        """One revolution per sidereal day sits near 35,786 km."""
        altitude = altitude_from_mean_motion(1.00273791)

        assert_allclose(altitude, 35793, atol=20)

    def test_string_input(self):
        assert altitude_from_mean_motion("15.5") == altitude_from_mean_motion(15.5)

    @pytest.mark.parametrize("value", [None, "abc", 0, -1.0, float("nan")])
    def test_invalid_mean_motion(self, value):
        assert altitude_from_mean_motion(value) is None


class TestFilterByAltitude:
    """Tests for filter_by_altitude function."""

    def test_keeps_records_in_band(self):
        kept = filter_by_altitude([_ISS, _GPS], 300, 2000)

        assert kept == [_ISS]

    def test_drops_unparseable(self):
        kept = filter_by_altitude([_ISS, _BROKEN], 0, 100000)

        assert kept == [_ISS]

    def test_inclusive_bounds(self):
        altitude = altitude_from_mean_motion(15.5)

        assert filter_by_altitude([_ISS], altitude, altitude) == [_ISS]

    def test_empty(self):
        assert filter_by_altitude([], 0, 1000) == []


def _connector(handler):
    return SpaceTrackConnector(
        "user@example.com",
        "secret",
        base_url="https://spacetrack.test",
        transport=httpx.MockTransport(handler),
    )


class TestSpaceTrackConnector:
    """Tests for SpaceTrackConnector against httpx.MockTransport."""

    @pytest.mark.asyncio
    async def test_authenticate_success(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = request.content.decode()
            return httpx.Response(200, json={})

        async with _connector(handler) as conn:
            assert await conn.authenticate() is True

        assert seen["path"] == "/ajaxauth/login"
        assert "identity=user%40example.com" in seen["body"]
        assert "password=secret" in seen["body"]

    @pytest.mark.asyncio
    async def test_authenticate_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"Login": "Failed"})

        async with _connector(handler) as conn:
            assert await conn.authenticate() is False

    @pytest.mark.asyncio
    async def test_authenticate_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        async with _connector(handler) as conn:
            assert await conn.authenticate() is False

    @pytest.mark.asyncio
    async def test_fetch_filters_by_altitude(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path.startswith("/basicspacedata/query/class/tle")
            return httpx.Response(200, json=[_ISS, _GPS, _BROKEN])

        async with _connector(handler) as conn:
            records = await conn.fetch_tle_data(300, 2000)

        assert records == [_ISS]

    @pytest.mark.asyncio
    async def test_fetch_http_error_returns_empty(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="server error")

        async with _connector(handler) as conn:
            assert await conn.fetch_tle_data(300, 2000) == []

    @pytest.mark.asyncio
    async def test_fetch_invalid_json_returns_empty(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        async with _connector(handler) as conn:
            assert await conn.fetch_tle_data(300, 2000) == []

    @pytest.mark.asyncio
    async def test_fetch_unexpected_payload_returns_empty(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"error": "rate limited"})

        async with _connector(handler) as conn:
            assert await conn.fetch_tle_data(300, 2000) == []
