"""
Metric Normalization

Turns raw metric values (clean numbers or formatted text such as "$12,345")
into bounded, display-safe numbers for the dashboard widgets.

Every function here is total: malformed input degrades to 0 and nothing
is raised to the caller.
"""

import math
import re
from numbers import Real
from typing import List, Optional, Sequence

# Bar widths and heights are percentages of their container
MIN_BAR_WIDTH = 2
MAX_PERCENT = 100
MIN_HISTOGRAM_HEIGHT = 12

# Shown in place of an absent or empty price history
PLACEHOLDER_BAR_COUNT = 7
PLACEHOLDER_BAR_HEIGHT = 18

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_FLOAT = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def finite_float(value) -> Optional[float]:
    """
    Convert a number to a finite float.

    Returns None for non-numbers, NaN, infinities and integers too large
    to fit in a float.
    """
    if not _is_number(value):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]"""
    return max(lower, min(upper, value))


def parse_number(text: str) -> Optional[float]:
    """
    Parse the leading float out of a metric string.

    Commas are dropped, then everything that is not a digit, '.' or '-'.
    Whatever float prefix remains is parsed, so "12.3.4" reads as 12.3.

    Returns:
        The parsed value, or None when nothing numeric is left

    Examples:
        >>> parse_number("$12,345.50")
        12345.5
        >>> parse_number("abc") is None
        True
    """
    cleaned = _NON_NUMERIC.sub("", text.replace(",", ""))
    match = _LEADING_FLOAT.match(cleaned)
    if not match:
        return None

    parsed = float(match.group(0))
    return parsed if math.isfinite(parsed) else None


def normalize_magnitude(value) -> float:
    """
    Normalize a liquidity/volume/spread style value to a finite number >= 0.

    Examples:
        >>> normalize_magnitude(1500)
        1500.0
        >>> normalize_magnitude("12,345.50")
        12345.5
        >>> normalize_magnitude("-5")
        0
    """
    if _is_number(value):
        number = finite_float(value)
        return max(0.0, number) if number is not None else 0

    if isinstance(value, str):
        parsed = parse_number(value)
        return max(0, parsed) if parsed is not None else 0

    return 0


def compute_scale_max(*values: float) -> float:
    """Largest magnitude in a visual group, floored at 1"""
    return max([*values, 1])


def compute_bar_width(value: float, scale_max: float) -> float:
    """
    Width of a magnitude bar as a percentage of its scale.

    Never below MIN_BAR_WIDTH so a zero value still leaves a visible sliver.
    """
    value = finite_float(value) or 0.0
    scale_max = max(finite_float(scale_max) or 1.0, 1)
    return clamp(value / scale_max * 100, MIN_BAR_WIDTH, MAX_PERCENT)


def compute_probability_width(implied_probability) -> float:
    """Width of the implied probability bar, in [0, 100]"""
    implied_probability = finite_float(implied_probability)
    if implied_probability is None:
        return 0
    return clamp(implied_probability * 100, 0, MAX_PERCENT)


def compute_histogram_bar_height(point: float) -> float:
    """Height of one historical price bar, in [12, 100]"""
    point = finite_float(point)
    if point is None:
        return MIN_HISTOGRAM_HEIGHT
    return clamp(point * 100, MIN_HISTOGRAM_HEIGHT, MAX_PERCENT)


def compute_histogram_heights(series: Optional[Sequence[float]]) -> List[float]:
    """
    Bar heights for a historical price series.

    An absent or empty series yields a fixed placeholder row instead.
    """
    if not series:
        return [PLACEHOLDER_BAR_HEIGHT] * PLACEHOLDER_BAR_COUNT
    return [compute_histogram_bar_height(point) for point in series]


def format_percent(width: float) -> str:
    """
    Render a width as a CSS percentage.

    Examples:
        >>> format_percent(42.0)
        '42%'
        >>> format_percent(12.5)
        '12.5%'
    """
    return f"{round(width, 4):g}%"
