"""
Trend Classification Module

Labels a series as increasing / decreasing / stable by comparing the mean of
the most recent window against the window immediately before it.
"""

from typing import Dict, Sequence

import numpy as np
import structlog

from .config import AnalyticsConfig, DEFAULT_CONFIG

logger = structlog.get_logger(__name__)

INSUFFICIENT_DATA = 'insufficient_data'
INCREASING = 'increasing'
DECREASING = 'decreasing'
STABLE = 'stable'


def classify_trend(
    series: Sequence[float],
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> str:
    """Classify the direction of a time series.

    recent = last 7 points, older = the up-to-7 points before those
    (``series[-14:-7]``).

        change_pct = (mean(recent) - mean(older)) / mean(older) * 100

    Args:
        series: Chronological values
        config: Window size and change threshold

    Returns:
        'increasing' if change_pct > 10, 'decreasing' if < -10, else 'stable'.
        'insufficient_data' when fewer than 2 points or the older window is
        empty. An older window with mean exactly 0 is 'stable'.
    """
    values = np.asarray(series, dtype=float)
    window = config.trend_window

    if values.size < 2:
        return INSUFFICIENT_DATA

    recent = values[-window:]
    older = values[-2 * window:-window]

    if older.size == 0:
        return INSUFFICIENT_DATA

    recent_avg = float(np.mean(recent))
    older_avg = float(np.mean(older))

    if older_avg == 0:
        logger.debug("classify_trend: zero baseline mean, reporting stable")
        return STABLE

    change_pct = (recent_avg - older_avg) / older_avg * 100

    if change_pct > config.trend_change_pct:
        return INCREASING
    if change_pct < -config.trend_change_pct:
        return DECREASING
    return STABLE


def summarize_risk_evolution(
    series: Sequence[float],
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> Dict:
    """Summarize a risk timeline for the risk-evolution panel.

    Returns:
        Dict with avg_risk, max_risk, min_risk, trend and points. An empty
        series yields zeros and 'insufficient_data'.
    """
    values = np.asarray(series, dtype=float)

    if values.size == 0:
        return {
            'avg_risk': 0.0,
            'max_risk': 0.0,
            'min_risk': 0.0,
            'trend': INSUFFICIENT_DATA,
            'points': 0,
        }

    summary = {
        'avg_risk': float(np.mean(values)),
        'max_risk': float(np.max(values)),
        'min_risk': float(np.min(values)),
        'trend': classify_trend(values, config),
        'points': int(values.size),
    }

    logger.info(
        "summarize_risk_evolution: summary computed",
        points=summary['points'],
        trend=summary['trend'],
    )

    return summary
