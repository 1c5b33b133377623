"""Metric normalization for display"""

from .normalize import (
    normalize_magnitude,
    compute_scale_max,
    compute_bar_width,
    compute_probability_width,
    compute_histogram_bar_height,
    compute_histogram_heights,
    format_percent,
)

__all__ = [
    "normalize_magnitude",
    "compute_scale_max",
    "compute_bar_width",
    "compute_probability_width",
    "compute_histogram_bar_height",
    "compute_histogram_heights",
    "format_percent",
]
