"""Metrics endpoint and providers"""

from .analyze import bp, INVALID_URL_ERROR
from .providers import (
    MetricsProvider,
    MockMetricsProvider,
    UnavailableMetricsProvider,
    MOCK_METRICS,
)

__all__ = [
    "bp",
    "INVALID_URL_ERROR",
    "MetricsProvider",
    "MockMetricsProvider",
    "UnavailableMetricsProvider",
    "MOCK_METRICS",
]
