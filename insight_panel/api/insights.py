"""
FastAPI router module for Insight panel endpoints.

This module implements endpoints for:
- Insight reports: trend, volatility, spike and risk scoring for one series
- Data quality badge classification
- Numeric series extraction from a host data frame
- Full panel view assembly from raw host data and options
- The static explanation of how insights are computed

All computation is delegated to the pure services in insight_panel.services;
the handlers only translate errors into HTTP responses.
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from insight_panel.core.dependencies import SettingsDep
from insight_panel.models import (
    DataQuality,
    DataQualityRequest,
    InsightReport,
    InsightRequest,
    PanelData,
    PanelRequest,
    PanelView,
)
from insight_panel.services.data_quality import classify_data_quality
from insight_panel.services.insight_engine import analyze
from insight_panel.services.panel_options import resolve_panel_options
from insight_panel.services.panel_view import build_panel_view, explain_insight
from insight_panel.services.series_extraction import pick_numeric_values

# Configure logging
logger = logging.getLogger(__name__)

# Create router with prefix and tags for OpenAPI documentation
router = APIRouter(prefix="/insights", tags=["insights"])


@router.post("/analyze", response_model=InsightReport)
async def analyze_series(request: InsightRequest) -> InsightReport:
    """
    Compute the insight report for a numeric series.

    Series with fewer than 6 samples get the fixed low-data report.

    Args:
        request: Samples, insight mode and sensitivity

    Returns:
        InsightReport with risk score, summary, bullets and raw signals

    Raises:
        HTTPException 422: If the service rejects the parameters
        HTTPException 500: If the computation fails
    """
    try:
        return analyze(request.samples, request.mode, request.sensitivity)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid request parameters: {str(e)}",
        )
    except Exception as e:
        logger.error(f"Error computing insight: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error computing insight: {str(e)}",
        )


@router.post("/data-quality", response_model=DataQuality)
async def data_quality(request: DataQualityRequest) -> DataQuality:
    """
    Classify the data quality of a numeric series.

    Returns:
        DataQuality with LOW / MEDIUM / GOOD label and reason

    Raises:
        HTTPException 500: If the classification fails
    """
    try:
        return classify_data_quality(request.samples)
    except Exception as e:
        logger.error(f"Error classifying data quality: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error classifying data quality: {str(e)}",
        )


@router.post("/extract", response_model=List[float])
async def extract_series(data: PanelData) -> List[float]:
    """
    Extract the numeric series the insight would be computed from.

    Uses the first numeric column of the first frame; non-finite values
    are dropped.
    """
    return pick_numeric_values(data)


@router.post("/panel", response_model=PanelView)
async def panel_view(request: PanelRequest, settings: SettingsDep) -> PanelView:
    """
    Build the full panel view from raw host data and options.

    Options are normalized first: a non-numeric sensitivity or unknown mode
    falls back to the configured defaults instead of failing the request.

    Args:
        request: Host data, raw options and panel size
        settings: Application settings (option defaults)

    Returns:
        PanelView with the enabled sections populated

    Raises:
        HTTPException 500: If the view cannot be built
    """
    try:
        options = resolve_panel_options(request.options, settings)
        return build_panel_view(request.data, options, request.width, request.height)
    except Exception as e:
        logger.error(f"Error building panel view: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error building panel view: {str(e)}",
        )


@router.get("/explanation", response_model=List[str])
async def explanation() -> List[str]:
    """Describe how trend, volatility, anomalies and risk are derived."""
    return explain_insight()
