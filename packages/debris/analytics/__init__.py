"""
Debris Analytics Core

Deterministic statistical algorithms for orbital-debris monitoring.
Pure computation modules operating on plain numbers, sequences and numpy arrays.

Modules:
- config: Policy constants (weights, thresholds, smoothing factor)
- risk: Collision risk scoring and risk-factor explanation
- anomalies: Z-score anomaly detection and alert filtering
- forecasting: Single-anchor exponential smoothing
- trend: Trend classification and risk-evolution summaries
- hotspots: Hotspot ranking and region comparison
- engine: AnalyticsEngine facade
"""

# Config
from .config import AnalyticsConfig, DEFAULT_CONFIG

# Risk module
from .risk import (
    risk_score,
    explain_risk_factors,
)

# Anomaly module
from .anomalies import (
    detect_anomalies,
    anomaly_alerts,
    sensitivity_threshold,
)

# Forecasting module
from .forecasting import forecast

# Trend module
from .trend import (
    classify_trend,
    summarize_risk_evolution,
    INSUFFICIENT_DATA,
    INCREASING,
    DECREASING,
    STABLE,
)

# Hotspot module
from .hotspots import (
    identify_hotspots,
    compare_regions,
    utc_now,
)

from .engine import AnalyticsEngine

__all__ = [
    # Config
    'AnalyticsConfig',
    'DEFAULT_CONFIG',
    # Risk
    'risk_score',
    'explain_risk_factors',
    # Anomalies
    'detect_anomalies',
    'anomaly_alerts',
    'sensitivity_threshold',
    # Forecasting
    'forecast',
    # Trend
    'classify_trend',
    'summarize_risk_evolution',
    'INSUFFICIENT_DATA',
    'INCREASING',
    'DECREASING',
    'STABLE',
    # Hotspots
    'identify_hotspots',
    'compare_regions',
    'utc_now',
    # Engine
    'AnalyticsEngine',
]
