"""
Metrics Providers

Resolve a market URL to a MarketMetrics record. Only the mock provider
exists today; a live provider must keep the same interface and raise
MetricsUnavailableError when it cannot produce metrics.
"""

from ..exceptions import MetricsUnavailableError
from ..models import MarketMetrics
from ..utils.logging import get_logger, log_debug
from ..utils.parsers import extract_market_slug

logger = get_logger(__name__)

MOCK_METRICS = {
    "liquidity": 12345,
    "volume": 67890,
    "impliedProbability": 0.42,
    "spread": 0.03,
    "timeToResolution": "3 days",
    "historicalPrices": [0.4, 0.41, 0.42, 0.43],
}


class MetricsProvider:
    """Interface for anything that can produce metrics for a market URL"""

    def get_metrics(self, url: str) -> MarketMetrics:
        """
        Fetch metrics for the market at url.

        Raises:
            MetricsUnavailableError: metrics could not be produced
        """
        raise NotImplementedError


class MockMetricsProvider(MetricsProvider):
    """Returns the same fixed record whatever the URL"""

    def get_metrics(self, url: str) -> MarketMetrics:
        slug = extract_market_slug(url)
        log_debug(f"Serving mock metrics for {slug or url}", logger)
        return MarketMetrics.from_dict(MOCK_METRICS)


class UnavailableMetricsProvider(MetricsProvider):
    """Always fails; stands in for a backend that is down"""

    def __init__(self, reason: str = "Market data backend is unavailable"):
        self.reason = reason

    def get_metrics(self, url: str) -> MarketMetrics:
        raise MetricsUnavailableError(self.reason)
