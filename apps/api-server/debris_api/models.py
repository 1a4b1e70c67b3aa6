"""Pydantic request models for the debris API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class IngestRequest(BaseModel):
    """Body of POST /api/ingest-debris-data.

    ``debris`` is typed loosely so a missing or non-list value can be
    answered with 400 instead of a validation error.
    """

    debris: Any = None
    timestamp: str | None = None  # ISO 8601, defaults to ingestion time


class Measurement(BaseModel):
    """One region snapshot."""

    density: float = Field(ge=0)
    object_count: int = Field(ge=0)
    clustering: float = Field(ge=0, le=1)


class RegionMeasurement(Measurement):
    """Region snapshot with growth rate, used for comparisons."""

    growth_rate: float = 0.0


class AnomalyRequest(BaseModel):
    series: list[float]
    sensitivity: str = "medium"  # "low", "medium" or "high"


class ForecastRequest(BaseModel):
    series: list[float]
    periods: int = Field(default=30, ge=0, le=365)
    alpha: float | None = None


class TrendRequest(BaseModel):
    series: list[float]


class RiskMetrics(BaseModel):
    """Inputs for the risk-factor explanation."""

    growth_rate: float = Field(default=0.0, ge=0)
    object_count: float = Field(default=0.0, ge=0)
    clustering_index: float = Field(default=0.0, ge=0, le=1)
    inclination_factor: float | None = Field(default=None, ge=0)


class HotspotRequest(BaseModel):
    regions: dict[str, Measurement]
    threshold: float | None = None


class CompareRequest(BaseModel):
    region1: RegionMeasurement
    region2: RegionMeasurement
    region1_name: str = "Region 1"
    region2_name: str = "Region 2"
