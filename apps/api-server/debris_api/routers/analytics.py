"""Debris analytics API endpoints.

Thin adapters over ``debris.analytics``: each endpoint validates its body,
calls one pure analytics function and returns the result unchanged (no
rounding or formatting).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import structlog
from fastapi import APIRouter, Depends, HTTPException

from debris.analytics import AnalyticsEngine, anomaly_alerts, compare_regions, summarize_risk_evolution
from debris_api.config import Settings, get_settings
from debris_api.models import (
    AnomalyRequest,
    CompareRequest,
    ForecastRequest,
    HotspotRequest,
    Measurement,
    RiskMetrics,
    TrendRequest,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


def get_engine(settings: Settings = Depends(get_settings)) -> AnalyticsEngine:
    """Build an AnalyticsEngine with the service configuration."""
    return AnalyticsEngine(config=settings.analytics_config())


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.post("/risk-score")
async def risk_score(
    body: Measurement,
    engine: AnalyticsEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Return collision risk for one region snapshot."""
    score = engine.risk_score(body.density, body.object_count, body.clustering)
    return {"risk_score": score, "timestamp": _now()}


@router.post("/anomalies")
async def anomalies(
    body: AnomalyRequest,
    engine: AnalyticsEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Detect anomalous points in a density / risk series."""
    try:
        found = engine.detect_anomalies(body.series, body.sensitivity)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "anomalies_request",
        points=len(body.series),
        sensitivity=body.sensitivity,
        anomalies=len(found),
    )
    return {
        "anomaly_count": len(found),
        "anomalies": found,
        "alerts": anomaly_alerts(found, settings.ANOMALY_ALERT_SCORE),
        "timestamp": _now(),
    }


@router.post("/forecast")
async def forecast(
    body: ForecastRequest,
    engine: AnalyticsEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Project a density series forward."""
    try:
        projected = engine.forecast(body.series, body.periods, body.alpha)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "forecast": projected,
        "forecast_horizon": body.periods,
        "trend": engine.classify_trend(body.series),
        "timestamp": _now(),
    }


@router.post("/trend")
async def trend(
    body: TrendRequest,
    engine: AnalyticsEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Classify a risk series and summarise its evolution."""
    return {
        "trend": engine.classify_trend(body.series),
        "summary": summarize_risk_evolution(body.series, engine.config),
    }


@router.post("/explainability")
async def explainability(
    body: RiskMetrics,
    engine: AnalyticsEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Decompose risk into weighted contributing factors."""
    factors = engine.explain_risk_factors(body.model_dump())
    ranked = sorted(factors, key=lambda f: f["contribution"], reverse=True)
    return {
        "key_factors": factors,
        "top_factor": ranked[0]["name"] if ranked[0]["contribution"] > 0 else None,
    }


@router.post("/hotspots")
async def hotspots(
    body: HotspotRequest,
    engine: AnalyticsEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Rank regions whose risk exceeds the threshold."""
    regions = {name: m.model_dump() for name, m in body.regions.items()}
    found = engine.identify_hotspots(regions, body.threshold)
    return {"hotspot_count": len(found), "hotspots": found}


@router.post("/compare")
async def compare(
    body: CompareRequest,
    engine: AnalyticsEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Compare two orbital regions."""
    result = compare_regions(
        body.region1.model_dump(),
        body.region2.model_dump(),
        names=(body.region1_name, body.region2_name),
        config=engine.config,
    )
    return {
        "region1": body.region1_name,
        "region2": body.region2_name,
        **result,
    }
