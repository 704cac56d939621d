"""
Insight Engine - Heuristic Series Analytics

Turns a single numeric series into the summary shown in the panel's insight box:
1. TREND - First-to-last percentage change, classified UP / DOWN / FLAT
2. VOLATILITY - Population standard deviation relative to |mean|
3. ANOMALIES - Spike count at a z-score threshold set by mode and sensitivity
4. RISK SCORE - Additive 0-100 point system over the three signals above

This is a fixed heuristic, not a trained model. Every function here is pure:
identical inputs always produce identical reports.

Risk points (applied in order, then clamped to 0-100):
- trend DOWN: +18
- volatility > 0.25: +22
- volatility > 0.45: +18 (stacks with the above)
- spikes >= 1: +20
- spikes >= 3: +12 (stacks with the above)
- sensitivity: round((sensitivity - 50) * 0.2) clamped to [-5, 8]

Usage:
    from insight_panel.services.insight_engine import analyze

    report = analyze([10, 10, 10, 10, 10, 100], InsightMode.BALANCED, 60)
    report.riskScore  # 42
"""

import logging
import math
from typing import Dict, List, Sequence, Union

from insight_panel.models import (
    InsightMode,
    InsightReport,
    RiskBand,
    TrendDirection,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

# Added to denominators so a zero first value or zero mean never divides by zero
EPSILON: float = 1e-9

# Series shorter than this get the fixed low-data report
MIN_DATAPOINTS: int = 6

# Trend is FLAT within +/- this percentage
TREND_FLAT_BAND_PCT: float = 1.0

# Base z-score thresholds per mode
BASE_Z_THRESHOLDS: Dict[InsightMode, float] = {
    InsightMode.SAFE: 3.2,
    InsightMode.BALANCED: 2.7,
    InsightMode.AGGRESSIVE: 2.2,
}

# Sensitivity at which the threshold adjustment is zero
SENSITIVITY_PIVOT: float = 60.0

Z_THRESHOLD_MIN: float = 1.8
Z_THRESHOLD_MAX: float = 4.0

# Sensitivity at which the risk adjustment is zero, and its bounds
RISK_SENSITIVITY_PIVOT: float = 50.0
RISK_SENSITIVITY_WEIGHT: float = 0.2
RISK_SENSITIVITY_MIN: int = -5
RISK_SENSITIVITY_MAX: int = 8

# Volatility band edges for the narrative bullet
VOLATILITY_LOW_MAX: float = 0.15
VOLATILITY_MEDIUM_MAX: float = 0.35

# Summary band floors
HIGH_RISK_MIN: int = 70
MODERATE_RISK_MIN: int = 40

LOW_DATA_RISK_SCORE: int = 10

INSIGHT_TITLE = "AI Insight Engine"
LOW_DATA_TITLE = "AI Insight"
LOW_DATA_SUMMARY = (
    "Not enough data points for deeper analysis. "
    "Try a time series query with more samples."
)
LOW_DATA_BULLET = "Add more datapoints (>= 6) to enable trend/volatility checks."

SUMMARIES: Dict[RiskBand, str] = {
    RiskBand.HIGH: "High risk pattern detected. Consider alert rules and anomaly review.",
    RiskBand.MODERATE: "Moderate risk. Monitor trend & spikes; consider thresholds.",
    RiskBand.HEALTHY: "Looks healthy. Keep monitoring and validate with business context.",
}

# Shown by the panel when the explanation block is enabled
EXPLANATION_LINES: List[str] = [
    "Trend is estimated from first vs last value (direction & percentage change).",
    "Volatility is measured using standard deviation relative to the mean.",
    "Anomalies are detected using a z-score threshold (mode + sensitivity affect threshold).",
    "Risk score combines trend direction, volatility, and anomaly count.",
]


# =============================================================================
# Statistical Helper Functions
# =============================================================================


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a value into [lower, upper]."""
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward positive infinity.

    The dashboard host rounds this way (2.5 -> 3, -2.5 -> -2); Python's
    round() would round halves to even.
    """
    return math.floor(value + 0.5)


def mean(values: Sequence[float]) -> float:
    """
    Calculate the arithmetic mean of a sequence of values.

    Args:
        values: Numeric values

    Returns:
        Arithmetic mean, or 0 if empty
    """
    if not values:
        return 0.0
    return sum(values) / len(values)


def std_dev(values: Sequence[float]) -> float:
    """
    Calculate the population standard deviation of a sequence of values.

    Not Bessel-corrected: the variance is the plain average of squared
    deviations from the mean. Squares overflow to inf rather than raising.

    Args:
        values: Numeric values

    Returns:
        Standard deviation, or 0 if fewer than 2 values
    """
    if len(values) < 2:
        return 0.0
    avg = mean(values)
    return math.sqrt(mean([(v - avg) * (v - avg) for v in values]))


def relative_volatility(values: Sequence[float]) -> float:
    """
    Standard deviation divided by |mean| (plus EPSILON).

    Args:
        values: Numeric values

    Returns:
        Dimensionless dispersion ratio (>= 0)
    """
    return std_dev(values) / (abs(mean(values)) + EPSILON)


def z_score(value: float, avg: float, std: float) -> float:
    """
    Absolute z-score of a value, 0 when the standard deviation is 0.
    """
    if std == 0:
        return 0.0
    return abs(value - avg) / std


# =============================================================================
# Scoring Steps
# =============================================================================


def resolve_mode(mode: Union[InsightMode, str]) -> InsightMode:
    """
    Accept an InsightMode or its string value.

    Raises:
        ValueError: If the mode is not one of safe, balanced, aggressive
    """
    if isinstance(mode, InsightMode):
        return mode
    try:
        return InsightMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown insight mode: {mode!r}. "
            f"Valid values: {[m.value for m in InsightMode]}"
        ) from None


def calculate_trend(values: Sequence[float]) -> float:
    """
    Percentage change from the first to the last sample.

    The first value goes through abs() + EPSILON, so a series starting
    at 0 yields a very large (but finite) percentage instead of failing.
    """
    first = values[0]
    last = values[-1]
    return (last - first) / (abs(first) + EPSILON) * 100


def classify_trend(trend_pct: float) -> TrendDirection:
    """Classify a percentage change as UP, DOWN or FLAT."""
    if trend_pct > TREND_FLAT_BAND_PCT:
        return TrendDirection.UP
    if trend_pct < -TREND_FLAT_BAND_PCT:
        return TrendDirection.DOWN
    return TrendDirection.FLAT


def calculate_z_threshold(mode: Union[InsightMode, str], sensitivity: float) -> float:
    """
    Spike threshold for a mode and sensitivity.

    zThresh = clamp(base + (60 - sensitivity) / 100, 1.8, 4.0)

    Higher sensitivity lowers the threshold. Sensitivity is not clamped
    first; only the result is.

    Args:
        mode: Insight mode selecting the base threshold
        sensitivity: Caller-supplied sensitivity (nominally 0-100)

    Returns:
        z-score threshold in [1.8, 4.0]
    """
    base = BASE_Z_THRESHOLDS[resolve_mode(mode)]
    adjustment = (SENSITIVITY_PIVOT - sensitivity) / 100
    return clamp(base + adjustment, Z_THRESHOLD_MIN, Z_THRESHOLD_MAX)


def count_spikes(values: Sequence[float], threshold: float) -> int:
    """
    Count samples whose |z| meets or exceeds the threshold.

    A constant series (std 0) has no spikes.
    """
    avg = mean(values)
    std = std_dev(values)
    return len([v for v in values if z_score(v, avg, std) >= threshold])


def sensitivity_risk_adjustment(sensitivity: float) -> int:
    """Risk points contributed by sensitivity, in [-5, 8]."""
    points = round_half_up((sensitivity - RISK_SENSITIVITY_PIVOT) * RISK_SENSITIVITY_WEIGHT)
    return int(clamp(points, RISK_SENSITIVITY_MIN, RISK_SENSITIVITY_MAX))


def calculate_risk_score(
    trend_dir: TrendDirection,
    volatility: float,
    spike_count: int,
    sensitivity: float,
) -> int:
    """
    Additive risk score.

    Every condition is checked independently; the paired volatility and
    spike conditions stack.

    Args:
        trend_dir: Classified trend direction
        volatility: Relative volatility
        spike_count: Number of spikes
        sensitivity: Caller-supplied sensitivity

    Returns:
        Risk score in [0, 100]
    """
    risk = 0
    if trend_dir == TrendDirection.DOWN:
        risk += 18
    if volatility > 0.25:
        risk += 22
    if volatility > 0.45:
        risk += 18
    if spike_count >= 1:
        risk += 20
    if spike_count >= 3:
        risk += 12
    risk += sensitivity_risk_adjustment(sensitivity)
    return int(clamp(risk, 0, 100))


def classify_risk_band(risk_score: int) -> RiskBand:
    """Summary band: >= 70 high, >= 40 moderate, otherwise healthy."""
    if risk_score >= HIGH_RISK_MIN:
        return RiskBand.HIGH
    if risk_score >= MODERATE_RISK_MIN:
        return RiskBand.MODERATE
    return RiskBand.HEALTHY


def build_bullets(
    trend_dir: TrendDirection,
    trend_pct: float,
    volatility: float,
    spike_count: int,
    z_thresh: float,
) -> List[str]:
    """
    Narrative bullets: one for trend, one for volatility, one for anomalies.
    """
    bullets: List[str] = []

    if trend_dir == TrendDirection.UP:
        bullets.append(f"Trend: rising (~{trend_pct:.1f}%).")
    elif trend_dir == TrendDirection.DOWN:
        bullets.append(
            f"Trend: decreasing (~{trend_pct:.1f}%). Consider investigating causes."
        )
    else:
        bullets.append("Trend: mostly stable.")

    if volatility <= VOLATILITY_LOW_MAX:
        bullets.append("Volatility: low (stable signal).")
    elif volatility <= VOLATILITY_MEDIUM_MAX:
        bullets.append("Volatility: medium (watch for changes).")
    else:
        bullets.append("Volatility: high (noisy/unstable). Consider smoothing/alerts.")

    if spike_count == 0:
        bullets.append("Anomalies: no strong spikes detected.")
    else:
        bullets.append(
            f"Anomalies: {spike_count} potential spike(s) detected (z ≥ {z_thresh:.1f})."
        )

    return bullets


def low_data_report() -> InsightReport:
    """Fixed report for series shorter than MIN_DATAPOINTS."""
    return InsightReport(
        riskScore=LOW_DATA_RISK_SCORE,
        title=LOW_DATA_TITLE,
        summary=LOW_DATA_SUMMARY,
        bullets=[LOW_DATA_BULLET],
        zThresh=None,
        volatility=None,
        spikeCount=0,
        trendPct=0.0,
        trendDir=TrendDirection.LOW_DATA,
    )


# =============================================================================
# Main Entry Point
# =============================================================================


def analyze(
    samples: Sequence[float],
    mode: Union[InsightMode, str] = InsightMode.BALANCED,
    sensitivity: float = SENSITIVITY_PIVOT,
) -> InsightReport:
    """
    Build the insight report for a numeric series.

    The short-series guard wins over everything else: with fewer than 6
    samples the fixed low-data report is returned and nothing is computed.

    Args:
        samples: Ordered finite samples (chronological)
        mode: Insight mode (enum or its string value)
        sensitivity: Caller-supplied sensitivity, used unclamped

    Returns:
        InsightReport for the series

    Raises:
        ValueError: If mode is not a recognized insight mode (series of 6 or
            more samples only; short series never look at the mode)
    """
    values = list(samples)

    if len(values) < MIN_DATAPOINTS:
        return low_data_report()

    resolved_mode = resolve_mode(mode)

    trend_pct = calculate_trend(values)
    trend_dir = classify_trend(trend_pct)

    volatility = relative_volatility(values)

    z_thresh = calculate_z_threshold(resolved_mode, sensitivity)
    spike_count = count_spikes(values, z_thresh)

    risk_score = calculate_risk_score(trend_dir, volatility, spike_count, sensitivity)

    logger.debug(
        f"Insight for {len(values)} samples ({resolved_mode.value}, sensitivity={sensitivity}): "
        f"trend={trend_dir.value} vol={volatility:.3f} spikes={spike_count} risk={risk_score}"
    )

    return InsightReport(
        riskScore=risk_score,
        title=INSIGHT_TITLE,
        summary=SUMMARIES[classify_risk_band(risk_score)],
        bullets=build_bullets(trend_dir, trend_pct, volatility, spike_count, z_thresh),
        zThresh=z_thresh,
        volatility=volatility,
        spikeCount=spike_count,
        trendPct=trend_pct,
        trendDir=trend_dir,
    )
