"""Tests for debris.analytics.engine.AnalyticsEngine."""

import pytest
from pydantic import ValidationError

from debris.analytics import (
    AnalyticsConfig,
    AnalyticsEngine,
    classify_trend,
    detect_anomalies,
    explain_risk_factors,
    forecast,
    identify_hotspots,
    risk_score,
)


def test_engine_matches_module_functions(spiked_series, sample_regions, fixed_now):
    """Every engine method returns exactly what the module function returns."""
    engine = AnalyticsEngine(clock=fixed_now)
    metrics = {'growth_rate': 0.03, 'object_count': 12000, 'clustering_index': 0.4}

    assert engine.risk_score(4200, 18000, 0.3) == risk_score(4200, 18000, 0.3)
    assert engine.detect_anomalies(spiked_series, 'high') == detect_anomalies(spiked_series, 'high')
    assert engine.forecast(spiked_series, 5) == forecast(spiked_series, 5)
    assert engine.classify_trend(spiked_series) == classify_trend(spiked_series)
    assert engine.explain_risk_factors(metrics) == explain_risk_factors(metrics)
    assert engine.identify_hotspots(sample_regions) == identify_hotspots(sample_regions, now=fixed_now)


def test_engine_uses_bound_config(sample_regions, fixed_now):
    """The engine's config is applied to every call."""
    engine = AnalyticsEngine(AnalyticsConfig(hotspot_threshold=0.5), clock=fixed_now)

    assert len(engine.identify_hotspots(sample_regions)) == 3


def test_engine_is_stateless(spiked_series, fixed_now):
    """Repeated calls produce identical outputs."""
    engine = AnalyticsEngine(clock=fixed_now)

    first = engine.detect_anomalies(spiked_series)
    engine.forecast(spiked_series, 10)
    second = engine.detect_anomalies(spiked_series)

    assert first == second


def test_default_config_is_frozen():
    config = AnalyticsConfig()

    with pytest.raises(ValidationError):
        config.count_weight = 1.0

    assert config.count_weight == 0.4


@pytest.mark.parametrize(
    "field",
    ['density_reference', 'count_reference', 'growth_rate_reference', 'trend_window'],
)
@pytest.mark.parametrize("value", [0, -1])
def test_config_rejects_non_positive_references(field, value):
    """Reference values used as divisors must be positive."""
    with pytest.raises(ValidationError):
        AnalyticsConfig(**{field: value})


@pytest.mark.parametrize("value", [0.0, -2.0])
def test_config_rejects_non_positive_thresholds(value):
    with pytest.raises(ValidationError):
        AnalyticsConfig(sensitivity_thresholds={'medium': value})


def test_config_accepts_custom_thresholds():
    config = AnalyticsConfig(sensitivity_thresholds={'medium': 2.5})

    assert detect_anomalies([1, 2, 3, 10], 'medium', config) == []
