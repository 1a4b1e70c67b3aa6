"""
Unit tests for forecasting.py - Forecasting Module

Tests cover:
- Single-anchor exponential smoothing recurrence
- Horizon length and degenerate inputs
- Alpha validation
"""

import pytest
from numpy.testing import assert_allclose

from debris.analytics.config import AnalyticsConfig
from debris.analytics.forecasting import forecast


class TestForecast:
    """Tests for forecast function."""

    def test_empty_series(self):
        assert forecast([], 5) == []

    def test_zero_periods(self):
        assert forecast([1.0, 2.0, 3.0], 0) == []

    def test_negative_periods(self):
        assert forecast([1.0, 2.0, 3.0], -3) == []

    def test_length_matches_periods(self):
        assert len(forecast([3000, 3100, 3050], 30)) == 30

    def test_single_point_holds_anchor(self):
        """With current == last every step reproduces the anchor exactly."""
        assert forecast([100], 3, 0.3) == [100.0, 100.0, 100.0]

    def test_anchor_is_last_value(self):
        """Earlier history has no influence on the projection."""
        assert forecast([1, 2, 3, 50], 4) == forecast([50], 4)

    def test_recurrence(self):
        """Each step follows next = alpha * current + (1 - alpha) * last."""
        result = forecast([10.0, 20.0], 5, alpha=0.5)

        expected = []
        last = 20.0
        current = last
        for _ in range(5):
            current = 0.5 * current + 0.5 * last
            expected.append(current)

        assert_allclose(result, expected, rtol=1e-12)
        assert_allclose(result, [20.0] * 5, rtol=1e-12)

    def test_alpha_one(self):
        assert forecast([7.0, 9.0], 3, alpha=1.0) == [9.0, 9.0, 9.0]

    @pytest.mark.parametrize("alpha", [0.0, -0.1, 1.5])
    def test_invalid_alpha_raises(self, alpha):
        with pytest.raises(ValueError, match="Alpha must be in"):
            forecast([1.0, 2.0], 3, alpha=alpha)

    def test_default_alpha_from_config(self):
        config = AnalyticsConfig(default_alpha=0.9)

        assert forecast([4.0], 2, config=config) == [4.0, 4.0]

    def test_returns_python_floats(self):
        for value in forecast([1, 2, 3], 3):
            assert isinstance(value, float)

    def test_idempotent(self):
        series = [3100.5, 3200.25, 3150.0]
        assert forecast(series, 10, 0.4) == forecast(series, 10, 0.4)
