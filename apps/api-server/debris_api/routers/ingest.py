"""Debris data ingestion and retrieval endpoints."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, AsyncGenerator

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from debris.data.spacetrack import SpaceTrackConnector
from debris_api.config import Settings, get_settings
from debris_api.models import IngestRequest
from debris_api.store import DebrisStore, get_store

logger = structlog.get_logger()

router = APIRouter(prefix="/api", tags=["ingest"])


async def get_connector(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[SpaceTrackConnector, None]:
    """Yield a Space-Track session for one request."""
    if not settings.SPACETRACK_USERNAME or not settings.SPACETRACK_PASSWORD:
        raise HTTPException(status_code=503, detail="Space-Track credentials not configured")

    connector = SpaceTrackConnector(
        settings.SPACETRACK_USERNAME,
        settings.SPACETRACK_PASSWORD,
        base_url=settings.SPACETRACK_BASE_URL,
    )
    try:
        yield connector
    finally:
        await connector.close()


@router.post("/ingest-debris-data")
async def ingest_debris_data(
    body: IngestRequest,
    store: DebrisStore = Depends(get_store),
) -> dict[str, Any]:
    """Ingest a batch of TLE / debris records."""
    if not isinstance(body.debris, list):
        raise HTTPException(status_code=400, detail="debris array required")

    try:
        batch = await store.add_batch(body.debris, body.timestamp)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "success": True,
        "message": f"Ingested {len(body.debris)} records",
        "timestamp": batch["timestamp"],
    }


@router.get("/debris-data")
async def debris_data(
    time_window: int | None = Query(default=None, ge=0, description="Lookback window in days"),
    store: DebrisStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Return the most recent ingested batches, optionally limited to a window."""
    count, batches = await store.list_batches(
        time_window_days=time_window,
        limit=settings.MAX_RETURNED_BATCHES,
    )
    return {
        "data_count": count,
        "data": batches,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/ingest-spacetrack")
async def ingest_spacetrack(
    altitude_min: float = Query(default=300, ge=0, description="Lower altitude bound (km)"),
    altitude_max: float = Query(default=2000, gt=0, description="Upper altitude bound (km)"),
    store: DebrisStore = Depends(get_store),
    connector: SpaceTrackConnector = Depends(get_connector),
) -> dict[str, Any]:
    """Pull recent TLEs from Space-Track for an altitude band and store them."""
    if altitude_min > altitude_max:
        raise HTTPException(
            status_code=400,
            detail=f"altitude_min {altitude_min} exceeds altitude_max {altitude_max}",
        )

    if not await connector.authenticate():
        raise HTTPException(status_code=502, detail="Space-Track authentication failed")

    records = await connector.fetch_tle_data(altitude_min, altitude_max)
    batch = await store.add_batch(records)

    logger.info(
        "spacetrack_ingest_completed",
        records=len(records),
        altitude_min=altitude_min,
        altitude_max=altitude_max,
    )
    return {
        "success": True,
        "message": f"Ingested {len(records)} records",
        "timestamp": batch["timestamp"],
    }
