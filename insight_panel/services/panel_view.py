"""
Panel view assembly.

Combines series extraction, the insight engine and the data quality
classifier into the state the panel renders. Sections disabled by the
options are left empty; nothing here formats markup.
"""

import logging
from typing import Dict, List, Optional

from insight_panel.models import (
    DisplayMode,
    InsightReport,
    PanelData,
    PanelOptions,
    PanelView,
    SeriesCountSize,
)
from insight_panel.services.data_quality import classify_data_quality
from insight_panel.services.insight_engine import EXPLANATION_LINES, analyze, round_half_up
from insight_panel.services.series_extraction import pick_numeric_values

logger = logging.getLogger(__name__)


NO_DATA_MESSAGE = "No data received"
NO_DATA_DETAIL = (
    "Please run a query or select a data source. "
    "This panel gracefully handles empty or unreachable data states."
)

SERIES_COUNT_FONT_SIZES: Dict[SeriesCountSize, int] = {
    SeriesCountSize.SM: 14,
    SeriesCountSize.MD: 18,
    SeriesCountSize.LG: 22,
}


def format_sensitivity(sensitivity: float) -> str:
    """Render a sensitivity in full, without a trailing .0 for whole numbers."""
    if float(sensitivity).is_integer():
        return str(int(sensitivity))
    return repr(float(sensitivity))


def format_insight_header(options: PanelOptions, report: InsightReport) -> str:
    """Mode / sensitivity / risk line shown next to the insight title."""
    return (
        f"Mode: {options.aiInsightMode.value} • "
        f"Sensitivity: {format_sensitivity(options.aiSensitivity)} • "
        f"Risk: {report.riskScore}/100"
    )


def explain_insight() -> List[str]:
    """Fixed description of how the insight is computed."""
    return list(EXPLANATION_LINES)


def build_panel_view(
    data: Optional[PanelData],
    options: Optional[PanelOptions] = None,
    width: float = 0.0,
    height: float = 0.0,
) -> PanelView:
    """
    Build the render-ready panel state.

    Args:
        data: Query results from the host; None or no series is the no-data state
        options: Normalized panel options, defaults if omitted
        width: Panel width in pixels
        height: Panel height in pixels

    Returns:
        PanelView with only the enabled sections populated
    """
    options = options or PanelOptions()

    if data is None or not data.series:
        return PanelView(
            hasData=False,
            message=NO_DATA_MESSAGE,
            detail=NO_DATA_DETAIL,
        )

    view = PanelView(
        hasData=True,
        seriesCount=len(data.series),
        sizeLabel=f"Panel size: {round_half_up(width)} × {round_half_up(height)}",
        compact=options.displayMode == DisplayMode.COMPACT,
    )

    if options.showSeriesCount:
        view.seriesCountFontSize = SERIES_COUNT_FONT_SIZES[options.seriesCountSize]

    if not options.showAiInsight:
        return view

    samples = pick_numeric_values(data)
    report = analyze(samples, options.aiInsightMode, options.aiSensitivity)
    logger.debug(f"Panel view for {len(data.series)} series, {len(samples)} samples")

    view.insight = report
    view.insightHeader = format_insight_header(options, report)

    if options.showDataQuality:
        view.dataQuality = classify_data_quality(samples)

    if options.showAiExplanation:
        view.explanation = explain_insight()

    return view
