"""
Shared test fixtures for the debris analytics test suite.

Provides consistent test data across all test modules:
- Density series with and without injected spikes
- Region maps for hotspot ranking
- A fixed clock for deterministic hotspot timestamps
"""

from datetime import datetime, timezone

import numpy as np
import pytest


@pytest.fixture
def flat_series():
    """Constant density series (zero variance)."""
    return [10.0, 10.0, 10.0, 10.0, 10.0]


@pytest.fixture
def spiked_series():
    """Density series of 30 days with one large spike at index 20.

    Returns:
        list[float]: Noisy baseline around 3000 with a +4000 spike
    """
    rng = np.random.default_rng(42)
    base = 3000 + rng.normal(0, 50, 30)
    base[20] += 4000
    return base.tolist()


@pytest.fixture
def sample_regions():
    """Region map spanning high, medium and negligible risk."""
    return {
        '750-800 km': {'density': 5000, 'object_count': 40000, 'clustering': 0.9},
        '600-650 km': {'density': 2500, 'object_count': 20000, 'clustering': 0.5},
        '850-950 km': {'density': 8000, 'object_count': 45000, 'clustering': 0.8},
        'GEO belt': {'density': 1, 'object_count': 1, 'clustering': 0.0},
    }


@pytest.fixture
def fixed_now():
    """Clock pinned to 2025-06-01T12:00:00Z."""
    moment = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
    return lambda: moment
