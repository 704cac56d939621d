"""
Pydantic request/response models for the Insight Panel backend.

This module provides type-safe data validation and serialization for all API
contracts: the insight report and data quality badge produced by the analytics
services, the host data frame the numeric series is extracted from, the panel
options, and the render-ready panel view.

Field names use the camelCase spelling the dashboard host reads and writes.

All models use Pydantic v2 syntax with proper field validation and examples.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from insight_panel.models.enums import (
    InsightMode,
    TrendDirection,
    DataQualityLabel,
    FieldType,
    DisplayMode,
    SeriesCountSize,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Insight Engine Models
# =============================================================================


class InsightReport(BaseModel):
    """
    Heuristic insight summary for a single numeric series.

    Recomputed from scratch on every call; never persisted. `zThresh` and
    `volatility` are None when the series was too short to analyze.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "riskScore": 42,
                "title": "AI Insight Engine",
                "summary": "Moderate risk. Monitor trend & spikes; consider thresholds.",
                "bullets": [
                    "Trend: rising (~900.0%).",
                    "Volatility: high (noisy/unstable). Consider smoothing/alerts.",
                    "Anomalies: no strong spikes detected.",
                ],
                "zThresh": 2.7,
                "volatility": 1.342,
                "spikeCount": 0,
                "trendPct": 900.0,
                "trendDir": "UP",
            }
        },
    )

    riskScore: int = Field(
        ...,
        ge=0,
        le=100,
        description="Heuristic risk score (0-100)"
    )
    title: str = Field(
        ...,
        description="Insight box title"
    )
    summary: str = Field(
        ...,
        description="Canned sentence selected by risk band"
    )
    bullets: List[str] = Field(
        default_factory=list,
        description="Ordered human-readable observations"
    )
    zThresh: Optional[float] = Field(
        None,
        ge=1.8,
        le=4.0,
        description="Spike z-score threshold used, absent for short series"
    )
    volatility: Optional[float] = Field(
        None,
        description="Standard deviation relative to |mean|, absent for short series; may be inf or NaN for extreme magnitudes"
    )
    spikeCount: int = Field(
        0,
        ge=0,
        description="Number of samples with z-score at or above zThresh"
    )
    trendPct: float = Field(
        0.0,
        description="Percentage change from first to last sample"
    )
    trendDir: TrendDirection = Field(
        ...,
        description="Trend direction"
    )


class DataQuality(BaseModel):
    """
    Data quality badge for a numeric series.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "label": "GOOD",
                "reason": "Sufficient points and stable signal",
            }
        },
    )

    label: DataQualityLabel = Field(
        ...,
        description="Quality label"
    )
    reason: str = Field(
        ...,
        description="Human-readable reason, shown as the badge tooltip"
    )


class InsightRequest(BaseModel):
    """
    Request body for computing an insight report.

    Sensitivity is deliberately unbounded; the engine tolerates values
    outside 0-100.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "samples": [10, 10, 10, 10, 10, 100],
                "mode": "balanced",
                "sensitivity": 60,
            }
        }
    )

    samples: List[float] = Field(
        default_factory=list,
        description="Ordered numeric samples (chronological)"
    )
    mode: InsightMode = Field(
        InsightMode.BALANCED,
        description="Anomaly sensitivity mode"
    )
    sensitivity: float = Field(
        60.0,
        allow_inf_nan=False,
        description="Sensitivity, nominally 0-100"
    )


class DataQualityRequest(BaseModel):
    """Request body for classifying data quality."""
    samples: List[float] = Field(
        default_factory=list,
        description="Ordered numeric samples (chronological)"
    )


# =============================================================================
# Host Data Frame Models
# =============================================================================


class DataFrameField(BaseModel):
    """
    One column of a host data frame.

    Values are left untyped: hosts send mixed columns (timestamps, strings,
    nulls) and only finite numbers are picked up during extraction.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Value",
                "type": "number",
                "values": [1.5, 2.0, None, 3.25],
            }
        }
    )

    name: str = Field(
        "",
        description="Field name"
    )
    type: FieldType = Field(
        FieldType.OTHER,
        description="Field type as reported by the host"
    )
    values: List[Any] = Field(
        default_factory=list,
        description="Column values in row order"
    )


class DataFrame(BaseModel):
    """A host data frame (one query result series)."""
    name: Optional[str] = Field(
        None,
        description="Frame name"
    )
    fields: List[DataFrameField] = Field(
        default_factory=list,
        description="Frame columns"
    )


class PanelData(BaseModel):
    """Query results handed to the panel by the host."""
    series: List[DataFrame] = Field(
        default_factory=list,
        description="Result frames; only the first one feeds the insight"
    )


# =============================================================================
# Panel Options and View Models
# =============================================================================


class PanelOptions(BaseModel):
    """
    Normalized panel options.

    Defaults match the panel option builder. Raw host options should go
    through services.panel_options.resolve_panel_options, which repairs
    string-encoded or unrecognized values before validation. Any option
    that still fails validation takes its default.
    """
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "showName": True,
                "bgColor": "#1f1f1f",
                "displayMode": "center",
                "showSeriesCount": False,
                "seriesCountSize": "sm",
                "showAiInsight": True,
                "aiInsightMode": "balanced",
                "aiSensitivity": 60,
                "showAiExplanation": False,
                "showDataQuality": True,
            }
        },
    )

    text: str = "Default value of text input option"
    showName: bool = True
    bgColor: str = "#1f1f1f"
    displayMode: DisplayMode = DisplayMode.CENTER
    showSeriesCount: bool = False
    seriesCountSize: SeriesCountSize = SeriesCountSize.SM
    showAiInsight: bool = True
    aiInsightMode: InsightMode = InsightMode.BALANCED
    aiSensitivity: float = Field(60.0, allow_inf_nan=False)
    showAiExplanation: bool = False
    showDataQuality: bool = True

    @field_validator("*", mode="wrap")
    @classmethod
    def fallback_to_default(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        """Replace any option that fails validation with its default."""
        try:
            return handler(value)
        except ValidationError:
            default = cls.model_fields[info.field_name].get_default(call_default_factory=True)
            logger.warning(
                f"Invalid {info.field_name} option {value!r}, using default {default!r}"
            )
            return default


class PanelRequest(BaseModel):
    """
    Request body for building a panel view.

    `options` is the raw option map as stored by the host; it is normalized
    server-side so a malformed value never fails the request.
    """
    data: Optional[PanelData] = Field(
        None,
        description="Query results; None or empty means no data"
    )
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Raw panel options"
    )
    width: float = Field(
        0.0,
        ge=0.0,
        description="Panel width in pixels"
    )
    height: float = Field(
        0.0,
        ge=0.0,
        description="Panel height in pixels"
    )


class PanelView(BaseModel):
    """
    Render-ready panel state.

    Only the sections enabled by the options are populated; everything else
    stays None so the renderer can skip it.
    """
    hasData: bool = Field(
        ...,
        description="False when the host delivered no series"
    )
    message: Optional[str] = Field(
        None,
        description="Headline for the no-data state"
    )
    detail: Optional[str] = Field(
        None,
        description="Guidance text for the no-data state"
    )
    seriesCount: int = Field(
        0,
        ge=0,
        description="Number of frames received"
    )
    sizeLabel: Optional[str] = Field(
        None,
        description="Rounded panel size label"
    )
    compact: bool = Field(
        False,
        description="True for the compact display mode"
    )
    seriesCountFontSize: Optional[int] = Field(
        None,
        description="Series counter font size in px, None when the counter is hidden"
    )
    insight: Optional[InsightReport] = Field(
        None,
        description="Insight report, None when the insight box is hidden"
    )
    insightHeader: Optional[str] = Field(
        None,
        description="Mode / sensitivity / risk line of the insight box"
    )
    dataQuality: Optional[DataQuality] = Field(
        None,
        description="Data quality badge, None when hidden"
    )
    explanation: Optional[List[str]] = Field(
        None,
        description="How-it-works lines, None when hidden"
    )
