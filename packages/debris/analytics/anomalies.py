"""
Anomaly Detection Module

Z-score based anomaly flagging for density / risk time series, plus the
alert filter used by the dashboard summary.
"""

from typing import Dict, List, Sequence

import numpy as np
import structlog
from scipy import stats

from .config import AnalyticsConfig, DEFAULT_CONFIG

logger = structlog.get_logger(__name__)


def sensitivity_threshold(
    sensitivity: str,
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> float:
    """Map a sensitivity label to its z-score threshold.

    Higher sensitivity means a lower threshold and therefore more flags.
    """
    try:
        return config.sensitivity_thresholds[sensitivity]
    except KeyError:
        raise ValueError(
            f"Unknown sensitivity '{sensitivity}'. "
            f"Must be one of {sorted(config.sensitivity_thresholds)}"
        ) from None


def detect_anomalies(
    series: Sequence[float],
    sensitivity: str = 'medium',
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> List[Dict]:
    """Flag statistically unusual points in a time series.

    Mean and standard deviation are population statistics (ddof=0) over the
    full series. The first point is never evaluated, so index 0 is never
    flagged regardless of its deviation.

    anomaly_score = min(1, z_score / (2 * threshold))

    Args:
        series: Chronological values (list, numpy array or pandas Series)
        sensitivity: 'high' (1.5), 'medium' (2.0) or 'low' (3.0)
        config: Threshold table

    Returns:
        List of dicts in ascending index order:
        [{'index': int, 'value': float, 'z_score': float, 'anomaly_score': float}, ...]

    Raises:
        ValueError: If sensitivity is not a known label
    """
    threshold = sensitivity_threshold(sensitivity, config)

    values = np.asarray(series, dtype=float)

    if values.size < 2:
        return []

    std_dev = float(np.std(values))
    if std_dev == 0:
        # Constant series: every z-score is defined as 0
        logger.debug("detect_anomalies: zero variance series", points=int(values.size))
        return []

    z_scores = np.abs(stats.zscore(values, ddof=0))

    anomalies = []
    for i in range(1, values.size):
        z = float(z_scores[i])
        if z > threshold:
            anomalies.append({
                'index': i,
                'value': float(values[i]),
                'z_score': z,
                'anomaly_score': min(1.0, z / (threshold * 2)),
            })

    logger.info(
        "detect_anomalies: series scanned",
        points=int(values.size),
        sensitivity=sensitivity,
        threshold=threshold,
        num_anomalies=len(anomalies),
    )

    return anomalies


def anomaly_alerts(
    anomalies: List[Dict],
    alert_score: float = 0.8,
) -> List[Dict]:
    """Return the anomalies severe enough to raise a dashboard alert.

    Args:
        anomalies: Output of detect_anomalies
        alert_score: Strict lower bound on anomaly_score

    Returns:
        Sublist of anomalies with anomaly_score > alert_score, order preserved
    """
    return [a for a in anomalies if a['anomaly_score'] > alert_score]
