"""In-memory store for ingested debris batches.

Batches live in process memory only and are lost on restart.  Each batch
keeps the ingestion timestamp and the raw records exactly as received.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any

import pandas as pd
import structlog

logger = structlog.get_logger()


def _parse_timestamp(value: str | None, now: datetime) -> pd.Timestamp:
    """Parse an ISO-8601 string to a UTC Timestamp, defaulting to *now*."""
    if not value:
        return pd.Timestamp(now).tz_convert("UTC")
    try:
        return pd.to_datetime(value, utc=True)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"Invalid timestamp: {value!r}") from exc


class DebrisStore:
    """Append-only list of ingested batches guarded by an asyncio lock."""

    def __init__(self) -> None:
        self._batches: list[dict[str, Any]] = []
        self._lock = asyncio.Lock()

    async def add_batch(
        self,
        records: list[dict[str, Any]],
        timestamp: str | None = None,
        now: datetime | None = None,
    ) -> dict[str, Any]:
        """Store one batch of debris records.

        Raises:
            ValueError: If *timestamp* is given but not parseable.
        """
        now = now or datetime.now(timezone.utc)
        ts = _parse_timestamp(timestamp, now)
        batch = {"timestamp": ts.isoformat(), "records": list(records)}

        async with self._lock:
            self._batches.append(batch)
            total = len(self._batches)

        logger.info("debris_batch_ingested", records=len(records), batches=total)
        return batch

    async def list_batches(
        self,
        time_window_days: int | None = None,
        limit: int = 100,
        now: datetime | None = None,
    ) -> tuple[int, list[dict[str, Any]]]:
        """Return (matching count, last *limit* matching batches).

        Batches older than *time_window_days* before *now* are excluded.
        """
        async with self._lock:
            batches = list(self._batches)

        if time_window_days is not None and batches:
            now = now or datetime.now(timezone.utc)
            cutoff = pd.Timestamp(now - timedelta(days=time_window_days)).tz_convert("UTC")
            stamps = pd.to_datetime([b["timestamp"] for b in batches], utc=True)
            batches = [b for b, ts in zip(batches, stamps) if ts >= cutoff]

        return len(batches), batches[-limit:] if limit > 0 else []

    async def clear(self) -> None:
        async with self._lock:
            self._batches.clear()


_store = DebrisStore()


def get_store() -> DebrisStore:
    """Return the process-wide store."""
    return _store
