"""Space-Track TLE connector.

Authenticates against the Space-Track catalogue, retrieves recent TLE records
and filters them to an altitude band using the mean-motion approximation.
The analytics core never calls this module; it only consumes the filtered
records the API layer derives from it.

Usage::

    from debris.data.spacetrack import SpaceTrackConnector

    async with SpaceTrackConnector(username, password) as conn:
        if await conn.authenticate():
            records = await conn.fetch_tle_data(300, 2000)
"""

from __future__ import annotations

import math
from typing import Any

import httpx
import structlog

logger = structlog.get_logger()

SPACETRACK_BASE_URL = "https://www.space-track.org"

_LOGIN_PATH = "/ajaxauth/login"
_TLE_QUERY_PATH = "/basicspacedata/query/class/tle/DECAY_DATE/null-val/EPOCH/>now-30/format/json"

EARTH_MU_KM3_S2 = 398600.4418
EARTH_RADIUS_KM = 6371.0
_SECONDS_PER_DAY = 86400.0


# ---------------------------------------------------------------------------
# Orbit helpers
# ---------------------------------------------------------------------------


def altitude_from_mean_motion(mean_motion: Any) -> float | None:
    """Approximate altitude (km) from TLE mean motion (revolutions per day).

    Semi-major axis from Kepler's third law, minus the mean Earth radius.
    Returns None when mean motion is missing, non-numeric or non-positive.
    """
    try:
        n = float(mean_motion)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(n) or n <= 0:
        return None

    angular_rate = n * 2 * math.pi / _SECONDS_PER_DAY
    semi_major_axis = (EARTH_MU_KM3_S2 / angular_rate**2) ** (1 / 3)
    return semi_major_axis - EARTH_RADIUS_KM


def filter_by_altitude(
    records: list[dict[str, Any]],
    altitude_min: float,
    altitude_max: float,
) -> list[dict[str, Any]]:
    """Keep records whose approximate altitude lies within [min, max] km."""
    kept = []
    dropped_unparseable = 0
    for record in records:
        altitude = altitude_from_mean_motion(record.get("MEAN_MOTION"))
        if altitude is None:
            dropped_unparseable += 1
            continue
        if altitude_min <= altitude <= altitude_max:
            kept.append(record)

    if dropped_unparseable:
        logger.debug("spacetrack_records_without_mean_motion", count=dropped_unparseable)

    return kept


# ---------------------------------------------------------------------------
# Connector
# ---------------------------------------------------------------------------


class SpaceTrackConnector:
    """Async session against the Space-Track REST API.

    A single ``httpx.AsyncClient`` keeps the login cookie between
    ``authenticate`` and subsequent queries.
    """

    def __init__(
        self,
        username: str,
        password: str,
        base_url: str = SPACETRACK_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.username = username
        self.password = password
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> SpaceTrackConnector:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._client.aclose()

    async def authenticate(self) -> bool:
        """Log in and keep the session cookie.

        Returns:
            True on HTTP 200, False on any HTTP or transport failure.
        """
        try:
            resp = await self._client.post(
                _LOGIN_PATH,
                data={"identity": self.username, "password": self.password},
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "spacetrack_auth_http_error",
                status_code=exc.response.status_code,
            )
            return False
        except httpx.HTTPError:
            logger.error("spacetrack_auth_failed", exc_info=True)
            return False

        logger.info("spacetrack_authenticated", username=self.username)
        return resp.status_code == 200

    async def fetch_tle_data(
        self,
        altitude_min: float,
        altitude_max: float,
    ) -> list[dict[str, Any]]:
        """Fetch recent TLE records restricted to an altitude band.

        Args:
            altitude_min: Lower altitude bound in km (inclusive).
            altitude_max: Upper altitude bound in km (inclusive).

        Returns:
            List of TLE record dicts; empty on any retrieval failure.
        """
        try:
            resp = await self._client.get(_TLE_QUERY_PATH)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "spacetrack_tle_http_error",
                status_code=exc.response.status_code,
            )
            return []
        except (httpx.HTTPError, ValueError):
            logger.error("spacetrack_tle_fetch_error", exc_info=True)
            return []

        if not isinstance(data, list):
            logger.warning("spacetrack_unexpected_payload", payload_type=type(data).__name__)
            return []

        records = filter_by_altitude(data, altitude_min, altitude_max)
        logger.info(
            "spacetrack_tle_fetched",
            total=len(data),
            in_band=len(records),
            altitude_min=altitude_min,
            altitude_max=altitude_max,
        )
        return records
