"""AnalyticsEngine: binds one policy config and one clock to the analytics functions."""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from .anomalies import detect_anomalies
from .config import AnalyticsConfig, DEFAULT_CONFIG
from .forecasting import forecast
from .hotspots import Clock, identify_hotspots, utc_now
from .risk import explain_risk_factors, risk_score
from .trend import classify_trend


class AnalyticsEngine:
    """Stateless facade over the six analytics operations.

    Holds no data between calls; the config and clock are fixed at
    construction so repeated calls with identical inputs give identical
    outputs (given a deterministic clock).
    """

    def __init__(
        self,
        config: AnalyticsConfig = DEFAULT_CONFIG,
        clock: Optional[Clock] = None,
    ):
        self.config = config
        self.clock = clock or utc_now

    def risk_score(self, density: float, object_count: float, clustering_index: float) -> float:
        return risk_score(density, object_count, clustering_index, self.config)

    def detect_anomalies(self, series: Sequence[float], sensitivity: str = 'medium') -> List[Dict]:
        return detect_anomalies(series, sensitivity, self.config)

    def forecast(
        self,
        series: Sequence[float],
        periods: int,
        alpha: Optional[float] = None,
    ) -> List[float]:
        return forecast(series, periods, alpha, self.config)

    def classify_trend(self, series: Sequence[float]) -> str:
        return classify_trend(series, self.config)

    def explain_risk_factors(self, metrics: Mapping[str, Any]) -> List[Dict]:
        return explain_risk_factors(metrics, self.config)

    def identify_hotspots(
        self,
        regions: Mapping[str, Mapping[str, Any]],
        threshold: Optional[float] = None,
    ) -> List[Dict]:
        return identify_hotspots(regions, threshold, self.clock, self.config)
