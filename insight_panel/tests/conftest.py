"""
Pytest Configuration and Shared Fixtures for Insight Panel Backend Tests.

This module provides fixtures and configuration for all backend tests:
- Custom markers for test organization
- Hand-checked sample series with known insight results
- Seeded synthetic series (numpy) for property-style checks
- Host data frame and settings fixtures for the panel and API tests
"""

from typing import Any, Dict, List

import numpy as np
import pytest

from insight_panel.core.config import Settings
from insight_panel.models import DataFrame, DataFrameField, FieldType, PanelData


# ============================================================
# PYTEST HOOKS
# ============================================================

def pytest_configure(config) -> None:
    """
    Configure custom pytest markers for test organization.

    Custom markers defined:
    - slow: Marks tests as slow (deselect with -m "not slow")
    - parity: Marks tests pinning results the dashboard panel already shows
    """
    config.addinivalue_line(
        'markers',
        'slow: marks tests as slow (deselect with -m "not slow")'
    )
    config.addinivalue_line(
        'markers',
        'parity: marks tests pinning results the dashboard panel already shows'
    )


# ============================================================
# SAMPLE SERIES FIXTURES
# ============================================================

@pytest.fixture
def constant_series() -> List[float]:
    """
    Six identical samples.

    mean=1, std=0, volatility=0, trend 0% (FLAT), no spikes.
    """
    return [1.0, 1.0, 1.0, 1.0, 1.0, 1.0]


@pytest.fixture
def single_outlier_series() -> List[float]:
    """
    Five flat samples followed by one jump.

    mean=25, std=sqrt(1125)~33.54, volatility~1.342, trend ~900% (UP).
    With only six samples the outlier's z-score is sqrt(5)~2.236, below the
    balanced threshold of 2.7, so no spike is counted.
    """
    return [10.0, 10.0, 10.0, 10.0, 10.0, 100.0]


@pytest.fixture
def long_outlier_series() -> List[float]:
    """
    Nineteen flat samples followed by one jump.

    mean=14.5, std~19.615, outlier z~4.359: one spike at any mode.
    """
    return [10.0] * 19 + [100.0]


@pytest.fixture
def declining_spiky_series() -> List[float]:
    """
    Series that trips every risk condition.

    first=10, last=5 (trend -50%, DOWN), three samples at 100 with z~2.998
    (three spikes at balanced), volatility~1.94.
    """
    return [10.0, 100.0, 100.0, 100.0] + [5.0] * 26


@pytest.fixture
def medium_volatility_series() -> List[float]:
    """
    Flat-trend series with volatility~0.289 (medium band, above 0.25).

    mean=10, std=sqrt(50/6)~2.887, max z~1.386.
    """
    return [10.0, 14.0, 6.0, 13.0, 7.0, 10.0]


@pytest.fixture
def random_series() -> List[List[float]]:
    """
    Seeded synthetic series of varying length, level and noise.

    Used for bound and determinism checks, not exact values.
    """
    rng = np.random.default_rng(42)
    series: List[List[float]] = []
    for length in (6, 7, 12, 30, 90, 180):
        level = rng.uniform(-50, 200)
        noise = rng.uniform(0.1, 40)
        values = rng.normal(level, noise, length)
        # Inject a few spikes into the longer series
        if length >= 30:
            idx = rng.choice(length, size=3, replace=False)
            values[idx] += noise * 6
        series.append([float(v) for v in values])
    return series


# ============================================================
# HOST DATA FIXTURES
# ============================================================

@pytest.fixture
def sample_panel_data(single_outlier_series: List[float]) -> PanelData:
    """
    One frame with a time column and a numeric value column.
    """
    return PanelData(
        series=[
            DataFrame(
                name="A",
                fields=[
                    DataFrameField(
                        name="Time",
                        type=FieldType.TIME,
                        values=[1700000000000 + i * 60000 for i in range(6)],
                    ),
                    DataFrameField(
                        name="Value",
                        type=FieldType.NUMBER,
                        values=list(single_outlier_series),
                    ),
                ],
            )
        ]
    )


@pytest.fixture
def raw_panel_options() -> Dict[str, Any]:
    """
    Option map as the host stores it: sensitivity is a text input string.
    """
    return {
        'text': 'Default value of text input option',
        'showName': True,
        'bgColor': '#1f1f1f',
        'displayMode': 'center',
        'showAiInsight': True,
        'aiInsightMode': 'balanced',
        'aiSensitivity': '60',
        'showDataQuality': True,
        'showAiExplanation': False,
        'showSeriesCount': False,
        'seriesCountSize': 'sm',
    }


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the stock option defaults, isolated from the environment."""
    return Settings(
        _env_file=None,
        app_name='Insight Panel API (test)',
        default_insight_mode='balanced',
        default_sensitivity=60.0,
    )
