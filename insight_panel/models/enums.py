"""
Enumeration definitions for the Insight Panel backend.

All enums inherit from both `str` and `Enum` to ensure JSON serialization compatibility
with Pydantic models, enabling automatic serialization/deserialization in API responses.

Enum values match the strings the dashboard host sends and displays:
- InsightMode, DisplayMode, SeriesCountSize: panel option builder radio values
- FieldType: data frame field types reported by the host
- TrendDirection, DataQualityLabel: labels shown in the insight box and badge
"""

from enum import Enum


class InsightMode(str, Enum):
    """
    Anomaly sensitivity mode selected in the panel options.

    Each mode sets the base z-score threshold for spike detection:
    - safe: 3.2 (fewest spikes flagged)
    - balanced: 2.7 (default)
    - aggressive: 2.2 (most spikes flagged)
    """
    SAFE = "safe"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


class TrendDirection(str, Enum):
    """
    Direction of the first-to-last change of a series.

    - UP: change above +1%
    - DOWN: change below -1%
    - FLAT: change within +/-1%
    - LOW_DATA: fewer than 6 samples, no trend computed
    """
    UP = "UP"
    DOWN = "DOWN"
    FLAT = "FLAT"
    LOW_DATA = "LOW_DATA"


class DataQualityLabel(str, Enum):
    """
    Data quality badge label.

    - LOW: not enough datapoints
    - MEDIUM: enough datapoints but a noisy signal
    - GOOD: enough datapoints and a stable signal
    """
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    GOOD = "GOOD"


class RiskBand(str, Enum):
    """Summary band selected from the risk score (>= 70, >= 40, below)."""
    HIGH = "high"
    MODERATE = "moderate"
    HEALTHY = "healthy"


class FieldType(str, Enum):
    """
    Field types of a host data frame column.

    Only `number` matters for series extraction; the rest are carried
    so that frames validate as sent by the host.
    """
    NUMBER = "number"
    STRING = "string"
    TIME = "time"
    BOOLEAN = "boolean"
    OTHER = "other"


class DisplayMode(str, Enum):
    """Panel layout mode: centered content or compact top-aligned content."""
    CENTER = "center"
    COMPACT = "compact"


class SeriesCountSize(str, Enum):
    """
    Font size preset for the series counter.

    Maps to pixel sizes: sm=14, md=18, lg=22.
    """
    SM = "sm"
    MD = "md"
    LG = "lg"
