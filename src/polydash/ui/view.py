"""
Dashboard View

Owns the state of one dashboard (url, loading flag, error, metrics) and
drives a request to the metrics endpoint through discrete transitions:
idle -> loading -> success | error.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..config import Config
from ..exceptions import MetricsPayloadError, TransportError
from ..models import MarketMetrics
from ..utils.logging import get_logger, log_warning

logger = get_logger(__name__)

DEFAULT_FAILURE_MESSAGE = "Failed to analyze market"
GENERIC_ERROR_MESSAGE = "An error occurred"

IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class DashboardState:
    """Snapshot of the view; every transition produces a new one"""
    url: str = ""
    loading: bool = False
    error: str = ""
    metrics: Optional[MarketMetrics] = None

    @property
    def status(self) -> str:
        if self.loading:
            return LOADING
        if self.error:
            return ERROR
        if self.metrics is not None:
            return SUCCESS
        return IDLE

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.url)


class DashboardView:
    """Submits a market URL to the metrics endpoint and tracks the result"""

    def __init__(self, transport, analyze_path: str = None, url: str = ""):
        self.transport = transport
        self.analyze_path = analyze_path or Config.ANALYZE_PATH
        self._state = DashboardState(url=url)

    @property
    def state(self) -> DashboardState:
        return self._state

    def set_url(self, url: str) -> DashboardState:
        """Update the input URL; ignored while a request is in flight"""
        if not self._state.loading:
            self._state = replace(self._state, url=url)
        return self._state

    def analyze(self) -> DashboardState:
        """
        Send the current URL to the metrics endpoint.

        Does nothing unless the state allows a submission. Metrics and error
        are cleared up front; on failure the metrics stay unset and the
        error holds a single display message.
        """
        if not self._state.can_submit:
            return self._state

        self._state = replace(self._state, loading=True, error="", metrics=None)

        try:
            metrics = self._fetch_metrics(self._state.url)
        except (TransportError, MetricsPayloadError) as e:
            log_warning(f"Analyze failed for {self._state.url}: {e}", logger)
            self._state = replace(self._state, loading=False, error=str(e) or GENERIC_ERROR_MESSAGE)
            return self._state
        except Exception:
            logger.exception(f"Unexpected error analyzing {self._state.url}")
            self._state = replace(self._state, loading=False, error=GENERIC_ERROR_MESSAGE)
            return self._state

        self._state = replace(self._state, loading=False, metrics=metrics)
        return self._state

    def _fetch_metrics(self, url: str) -> MarketMetrics:
        status, body = self.transport.post_json(self.analyze_path, {"url": url})

        if not 200 <= status < 300:
            message = body.get("error")
            if not isinstance(message, str) or not message:
                message = DEFAULT_FAILURE_MESSAGE
            raise TransportError(message)

        return MarketMetrics.from_dict(body.get("metrics"))
