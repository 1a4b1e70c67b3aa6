"""
Hotspot Ranking Module

Applies risk scoring across named orbital regions, returning the regions that
exceed a threshold ranked by risk, and side-by-side region comparison.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import structlog

from .config import AnalyticsConfig, DEFAULT_CONFIG
from .risk import risk_score

logger = structlog.get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current UTC time."""
    return datetime.now(timezone.utc)


def _region_risk(data: Mapping[str, Any], config: AnalyticsConfig) -> float:
    """Score a region record; 'clustering_index' is accepted for 'clustering'."""
    clustering = data.get('clustering')
    if clustering is None:
        clustering = data.get('clustering_index', 0.0)
    return risk_score(
        data.get('density', 0.0),
        data.get('object_count', data.get('objectCount', 0)),
        clustering,
        config,
    )


def identify_hotspots(
    regions: Mapping[str, Mapping[str, Any]],
    threshold: Optional[float] = None,
    now: Optional[Clock] = None,
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> List[Dict]:
    """Rank regions whose collision risk exceeds a threshold.

    Args:
        regions: Mapping of region name -> {'density', 'object_count', 'clustering'}
        threshold: Strict lower bound on risk_score; defaults to
            config.hotspot_threshold (0.7)
        now: Clock used to timestamp the evaluation; read once per call
        config: Risk weights

    Returns:
        List of dicts sorted by risk_score descending:
        [{'region': str, 'risk_score': float, 'density': float, 'timestamp': str}, ...]
        Ties keep the input iteration order.
    """
    if threshold is None:
        threshold = config.hotspot_threshold
    clock = now or utc_now

    timestamp = clock().isoformat()

    hotspots = []
    for region, data in regions.items():
        score = _region_risk(data, config)

        if score > threshold:
            hotspots.append({
                'region': region,
                'risk_score': score,
                'density': float(data.get('density', 0.0)),
                'timestamp': timestamp,
            })

    hotspots.sort(key=lambda x: x['risk_score'], reverse=True)

    logger.info(
        "identify_hotspots: regions ranked",
        num_regions=len(regions),
        num_hotspots=len(hotspots),
        threshold=threshold,
    )

    return hotspots


def compare_regions(
    region_a: Mapping[str, Any],
    region_b: Mapping[str, Any],
    names: Tuple[str, str] = ('Region 1', 'Region 2'),
    config: AnalyticsConfig = DEFAULT_CONFIG,
) -> Dict:
    """Compare two region measurements metric by metric.

    Args:
        region_a: {'density', 'object_count', 'clustering', 'growth_rate'}
        region_b: Same shape as region_a
        names: Display names used in the insight strings
        config: Risk weights

    Returns:
        Dict with each region's metrics (including computed collision_risk),
        a 'difference' block (a minus b) and three insight strings.
    """
    name_a, name_b = names

    def _metrics(data: Mapping[str, Any]) -> Dict:
        return {
            'density': float(data.get('density', 0.0)),
            'object_count': int(data.get('object_count', 0)),
            'clustering': float(data.get('clustering', data.get('clustering_index', 0.0))),
            'growth_rate': float(data.get('growth_rate', 0.0)),
            'collision_risk': _region_risk(data, config),
        }

    metrics_a = _metrics(region_a)
    metrics_b = _metrics(region_b)

    density_delta = metrics_a['density'] - metrics_b['density']
    risk_delta = metrics_a['collision_risk'] - metrics_b['collision_risk']
    growth_delta = metrics_a['growth_rate'] - metrics_b['growth_rate']

    insights = [
        f"{name_a} has {abs(density_delta):g} "
        f"{'higher' if density_delta > 0 else 'lower'} debris density",
        f"{name_a} shows {'higher' if risk_delta > 0 else 'lower'} collision risk "
        f"({abs(risk_delta) * 100:.0f}% difference)",
        f"Growth rate in {name_a} is "
        f"{'faster' if growth_delta > 0 else 'slower'} than {name_b}",
    ]

    return {
        'region_a': metrics_a,
        'region_b': metrics_b,
        'difference': {
            'density_delta': density_delta,
            'risk_delta': risk_delta,
            'growth_delta': growth_delta,
        },
        'insights': insights,
    }
