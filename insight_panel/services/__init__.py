"""
Insight Panel Services Module

This module contains the business logic of the Insight panel. Each service is
stateless and testable.

Services:
- insight_engine: Trend / volatility / spike heuristics and risk scoring
- data_quality: Data quality badge classification
- series_extraction: Numeric series extraction from host data frames
- panel_options: Tolerant normalization of host panel options
- panel_view: Render-ready panel state assembly

All services are designed to be consumed by the API layer (insight_panel/api/).
"""

# =============================================================================
# Insight Engine Exports
# =============================================================================

from insight_panel.services.insight_engine import (
    analyze,
    calculate_trend,
    classify_trend,
    calculate_z_threshold,
    count_spikes,
    calculate_risk_score,
    classify_risk_band,
    build_bullets,
    low_data_report,
    relative_volatility,
    EXPLANATION_LINES,
    MIN_DATAPOINTS,
)

# =============================================================================
# Data Quality Exports
# =============================================================================

from insight_panel.services.data_quality import classify_data_quality

# =============================================================================
# Panel Glue Exports
# =============================================================================

from insight_panel.services.series_extraction import pick_numeric_values, find_numeric_field
from insight_panel.services.panel_options import (
    normalize_insight_mode,
    normalize_sensitivity,
    resolve_panel_options,
)
from insight_panel.services.panel_view import build_panel_view, explain_insight

__all__ = [
    # Insight Engine
    "analyze",
    "calculate_trend",
    "classify_trend",
    "calculate_z_threshold",
    "count_spikes",
    "calculate_risk_score",
    "classify_risk_band",
    "build_bullets",
    "low_data_report",
    "relative_volatility",
    "EXPLANATION_LINES",
    "MIN_DATAPOINTS",
    # Data Quality
    "classify_data_quality",
    # Panel Glue
    "pick_numeric_values",
    "find_numeric_field",
    "normalize_insight_mode",
    "normalize_sensitivity",
    "resolve_panel_options",
    "build_panel_view",
    "explain_insight",
]
