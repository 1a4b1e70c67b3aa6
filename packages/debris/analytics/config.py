"""Analytics policy constants.

Every weight, reference value and threshold used by the analytics core lives
on ``AnalyticsConfig`` so the scoring policy can be inspected and overridden
in one place.  ``DEFAULT_CONFIG`` carries the production defaults.
"""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field, PositiveFloat


class AnalyticsConfig(BaseModel):
    """Fixed (not learned) parameters for risk, anomaly, trend and forecast logic."""

    # Risk scoring (risk.risk_score)
    density_reference: float = Field(default=1000.0, gt=0)  # density at which the log term is zero
    density_weight: float = 0.3
    count_reference: float = Field(default=50000.0, gt=0)  # object count that saturates the count term
    count_weight: float = 0.4
    cluster_weight: float = 0.3

    # Anomaly detection: sensitivity label -> z-score threshold
    sensitivity_thresholds: Dict[str, PositiveFloat] = Field(
        default_factory=lambda: {"high": 1.5, "medium": 2.0, "low": 3.0}
    )

    # Forecasting
    default_alpha: float = 0.3

    # Trend classification
    trend_window: int = Field(default=7, gt=0)  # points per window (recent / older)
    trend_change_pct: float = 10.0  # |change| above this is a trend

    # Risk factor explanation
    growth_rate_reference: float = Field(default=0.1, gt=0)
    orbital_decay_weight: float = 0.05
    default_inclination_factor: float = 0.2

    # Hotspot ranking
    hotspot_threshold: float = 0.7

    model_config = {"frozen": True}


DEFAULT_CONFIG = AnalyticsConfig()
