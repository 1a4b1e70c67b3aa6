"""
Forecasting Module

Short-horizon density projection with single-anchor exponential smoothing.
"""

from typing import List, Optional, Sequence

import numpy as np
import structlog

from .config import AnalyticsConfig, DEFAULT_CONFIG

logger = structlog.get_logger(__name__)


def forecast(
    series: Sequence[float],
    periods: int,
    alpha: Optional[float] = None,
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> List[float]:
    """Project a time series forward by `periods` steps.

    The anchor is the last historical value and never moves:

        next = alpha * current + (1 - alpha) * last

    starting from current = last, so the projection converges geometrically
    toward the anchor. This is not recursive smoothing over the history.

    Args:
        series: Chronological historical values
        periods: Number of future steps to produce
        alpha: Smoothing factor in (0, 1]; defaults to config.default_alpha
        config: Default smoothing factor

    Returns:
        List of `periods` forecast values (empty if series is empty or
        periods <= 0)

    Raises:
        ValueError: If alpha is outside (0, 1]
    """
    if alpha is None:
        alpha = config.default_alpha

    if not 0 < alpha <= 1:
        raise ValueError(f"Alpha must be in (0, 1], got {alpha}")

    values = np.asarray(series, dtype=float)

    if values.size == 0 or periods <= 0:
        return []

    last = float(values[-1])
    current = last

    projected = []
    for _ in range(periods):
        next_value = alpha * current + (1 - alpha) * last
        projected.append(next_value)
        current = next_value

    logger.debug(
        "forecast: projection computed",
        history=int(values.size),
        periods=periods,
        alpha=alpha,
        anchor=last,
    )

    return projected
