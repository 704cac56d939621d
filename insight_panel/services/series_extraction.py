"""
Numeric series extraction from host data frames.

The panel analyzes one series: the first numeric column of the first frame.
A column counts as numeric when the host types it as `number`; failing that,
the first column whose first value is a real number is used. Only finite
numbers are kept, in row order.
"""

import math
from typing import Any, List, Optional

from insight_panel.models import DataFrameField, FieldType, PanelData


def is_finite_number(value: Any) -> bool:
    """True for int/float values that are finite. Booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value)


def _is_real_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def find_numeric_field(fields: List[DataFrameField]) -> Optional[DataFrameField]:
    """
    Pick the column to analyze.

    Args:
        fields: Columns of a data frame

    Returns:
        The first `number` typed field, else the first field whose first
        value is a number, else None
    """
    for field in fields:
        if field.type == FieldType.NUMBER:
            return field
    for field in fields:
        if field.values and _is_real_number(field.values[0]):
            return field
    return None


def pick_numeric_values(data: Optional[PanelData]) -> List[float]:
    """
    Extract the numeric sample sequence the insight is computed from.

    Args:
        data: Query results from the host

    Returns:
        Finite values of the chosen column, possibly empty
    """
    if data is None or not data.series:
        return []

    frame = data.series[0]
    if not frame.fields:
        return []

    field = find_numeric_field(frame.fields)
    if field is None:
        return []

    return [float(v) for v in field.values if is_finite_number(v)]
