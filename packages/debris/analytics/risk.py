"""
Risk Scoring Module

Collision risk scoring and risk-factor decomposition for orbital regions.
Pure computation functions: plain numbers in, plain floats / dicts out.
"""

import math
from typing import Any, Dict, List, Mapping, Optional

import numpy as np
import structlog

from .config import AnalyticsConfig, DEFAULT_CONFIG

logger = structlog.get_logger(__name__)


def risk_score(
    density: float,
    object_count: float,
    clustering_index: float,
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> float:
    """Compute bounded collision risk for one region snapshot.

    risk = clamp(ln(density / 1000) * 0.3
                 + (object_count / 50000) * 0.4
                 + clustering_index * 0.3, 0, 1)

    Args:
        density: Debris density (objects per unit volume), expected > 0
        object_count: Number of tracked objects in the region
        clustering_index: Orbital clustering measure in [0, 1]
        config: Weights and reference values

    Returns:
        Risk score in [0, 1]

    Note:
        Intermediate terms are not bounded; only the sum is clamped. A
        density <= 0 makes the log term -inf, which clamps to 0.0 rather
        than raising.
    """
    if density <= 0:
        logger.debug("risk_score: non-positive density, scoring as zero", density=density)
        return 0.0

    density_factor = math.log(density / config.density_reference) * config.density_weight
    count_factor = (object_count / config.count_reference) * config.count_weight
    cluster_factor = clustering_index * config.cluster_weight

    total = density_factor + count_factor + cluster_factor

    # np.clip passes NaN through
    if math.isnan(total):
        return 0.0

    return float(np.clip(total, 0.0, 1.0))


def _metric(metrics: Mapping[str, Any], key: str, alias: str) -> Optional[float]:
    """Read a metric by snake_case key, falling back to its camelCase alias."""
    value = metrics.get(key)
    if value is None:
        value = metrics.get(alias)
    return value


def explain_risk_factors(
    metrics: Mapping[str, Any],
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> List[Dict]:
    """Decompose a risk estimate into weighted, normalized contributing factors.

    Raw weights:
        Debris Growth       growth_rate / 0.1
        Object Count        object_count / 50000
        Clustering          clustering_index
        Orbital Decay       0.05 (constant)
        Inclination Impact  inclination_factor, default 0.2

    contribution = weight / sum(weights), so contributions sum to 1.

    Args:
        metrics: Mapping with growth_rate, object_count, clustering_index and
            optional inclination_factor (camelCase keys accepted)
        config: Reference values and fixed weights

    Returns:
        List of dicts: [{'name': str, 'weight': float, 'contribution': float}, ...]
        in fixed factor order. If every weight is zero each contribution is 0.0.
    """
    growth_rate = _metric(metrics, 'growth_rate', 'growthRate') or 0.0
    object_count = _metric(metrics, 'object_count', 'objectCount') or 0.0
    clustering_index = _metric(metrics, 'clustering_index', 'clusteringIndex') or 0.0
    inclination_factor = _metric(metrics, 'inclination_factor', 'inclinationFactor')
    if inclination_factor is None:
        inclination_factor = config.default_inclination_factor

    factors = [
        {'name': 'Debris Growth', 'weight': float(growth_rate) / config.growth_rate_reference},
        {'name': 'Object Count', 'weight': float(object_count) / config.count_reference},
        {'name': 'Clustering', 'weight': float(clustering_index)},
        {'name': 'Orbital Decay', 'weight': config.orbital_decay_weight},
        {'name': 'Inclination Impact', 'weight': float(inclination_factor)},
    ]

    total_weight = sum(f['weight'] for f in factors)

    if total_weight == 0:
        logger.warning("explain_risk_factors: zero total weight, contributions set to zero")
        for f in factors:
            f['contribution'] = 0.0
        return factors

    for f in factors:
        f['contribution'] = f['weight'] / total_weight

    logger.debug(
        "explain_risk_factors: factors computed",
        total_weight=total_weight,
        top_factor=max(factors, key=lambda f: f['contribution'])['name'],
    )

    return factors
