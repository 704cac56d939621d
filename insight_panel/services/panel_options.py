"""
Panel option normalization.

Host options arrive loosely typed: the sensitivity comes from a text input
and may be a string, and stored option maps can carry values from older
plugin versions. Everything here repairs instead of rejecting, so a bad
option never blanks the panel.
"""

import logging
import math
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, Union

from insight_panel.core.config import Settings, get_settings
from insight_panel.models import DisplayMode, InsightMode, PanelOptions, SeriesCountSize

logger = logging.getLogger(__name__)


def normalize_insight_mode(value: Any, default: Union[InsightMode, str] = InsightMode.BALANCED) -> InsightMode:
    """
    Map a raw mode option onto InsightMode.

    Matching is case-insensitive; missing or unknown values give the default.
    """
    if isinstance(value, InsightMode):
        return value
    if isinstance(value, str):
        for mode in InsightMode:
            if mode.value == value.strip().lower():
                return mode
    if value is not None:
        logger.warning(f"Unknown insight mode {value!r}, using {InsightMode(default).value}")
    return InsightMode(default)


def normalize_sensitivity(value: Any, default: float = 60.0) -> float:
    """
    Parse a raw sensitivity option.

    Numbers and numeric strings are accepted as-is (no range clamping);
    anything that does not parse to a finite number gives the default.
    An empty string parses as 0, the same as the host's numeric coercion.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            # float() accepts digit separators, the host does not
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    else:
        return default
    return number if math.isfinite(number) else default


def _drop_unknown(options: Dict[str, Any], key: str, enum_cls: Type[Enum]) -> None:
    """Remove an enum option whose value is not recognized so its default applies."""
    value = options.get(key)
    if value is not None and value not in [member.value for member in enum_cls]:
        logger.warning(f"Unknown {key} option {value!r}, using default")
        options.pop(key)


def resolve_panel_options(
    raw: Optional[Mapping[str, Any]],
    settings: Optional[Settings] = None,
) -> PanelOptions:
    """
    Build validated PanelOptions from a raw host option map.

    Missing insight mode and sensitivity fall back to the configured
    defaults; other missing options take the PanelOptions defaults.

    Args:
        raw: Option map as stored by the host (may be None)
        settings: Settings providing defaults, the cached singleton if omitted

    Returns:
        PanelOptions ready for the panel view
    """
    settings = settings or get_settings()
    options: Dict[str, Any] = {
        key: value for key, value in dict(raw or {}).items() if value is not None
    }

    default_mode = normalize_insight_mode(settings.default_insight_mode)
    options["aiInsightMode"] = normalize_insight_mode(
        options.get("aiInsightMode"), default_mode
    )
    options["aiSensitivity"] = normalize_sensitivity(
        options.get("aiSensitivity", settings.default_sensitivity),
        settings.default_sensitivity,
    )

    _drop_unknown(options, "displayMode", DisplayMode)
    _drop_unknown(options, "seriesCountSize", SeriesCountSize)

    return PanelOptions.model_validate(options)
