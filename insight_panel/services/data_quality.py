"""
Data Quality Classifier

Labels a numeric series for the panel's data quality badge:
- LOW: fewer than 6 datapoints (or no series at all)
- MEDIUM: relative volatility above 0.5
- GOOD: everything else

Independent of the insight engine: it recomputes mean and standard deviation
itself and keeps no state, so both can be called in any order.
"""

from typing import Optional, Sequence

from insight_panel.models import DataQuality, DataQualityLabel
from insight_panel.services.insight_engine import MIN_DATAPOINTS, relative_volatility


# Volatility above this marks the signal as noisy
NOISY_VOLATILITY_THRESHOLD: float = 0.5


def classify_data_quality(samples: Optional[Sequence[float]]) -> DataQuality:
    """
    Classify the quality of a numeric series.

    Args:
        samples: Ordered numeric samples, or None when nothing was extracted

    Returns:
        DataQuality with label and tooltip reason
    """
    if not samples or len(samples) < MIN_DATAPOINTS:
        return DataQuality(
            label=DataQualityLabel.LOW,
            reason="Not enough data points (< 6)",
        )

    if relative_volatility(list(samples)) > NOISY_VOLATILITY_THRESHOLD:
        return DataQuality(
            label=DataQualityLabel.MEDIUM,
            reason="High volatility (noisy signal)",
        )

    return DataQuality(
        label=DataQualityLabel.GOOD,
        reason="Sufficient points and stable signal",
    )
