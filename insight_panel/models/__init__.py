"""
Package initialization file for models.

This module exports all Pydantic schemas and enumerations from schemas.py and enums.py,
making them importable from insight_panel.models directly.

Usage:
    from insight_panel.models import (
        InsightMode,
        InsightReport,
        DataQuality,
        PanelData,
        # ... etc
    )
"""

# =============================================================================
# Enums
# =============================================================================

from insight_panel.models.enums import (
    # Insight Enums
    InsightMode,
    TrendDirection,
    DataQualityLabel,
    RiskBand,
    # Host Enums
    FieldType,
    DisplayMode,
    SeriesCountSize,
)

# =============================================================================
# Schemas
# =============================================================================

from insight_panel.models.schemas import (
    # Insight Engine
    InsightReport,
    DataQuality,
    InsightRequest,
    DataQualityRequest,
    # Host Data Frame
    DataFrameField,
    DataFrame,
    PanelData,
    # Panel
    PanelOptions,
    PanelRequest,
    PanelView,
)

__all__ = [
    # =========================================================================
    # Enums
    # =========================================================================
    "InsightMode",
    "TrendDirection",
    "DataQualityLabel",
    "RiskBand",
    "FieldType",
    "DisplayMode",
    "SeriesCountSize",

    # =========================================================================
    # Schemas - Insight Engine
    # =========================================================================
    "InsightReport",
    "DataQuality",
    "InsightRequest",
    "DataQualityRequest",

    # =========================================================================
    # Schemas - Host Data Frame
    # =========================================================================
    "DataFrameField",
    "DataFrame",
    "PanelData",

    # =========================================================================
    # Schemas - Panel
    # =========================================================================
    "PanelOptions",
    "PanelRequest",
    "PanelView",
]
