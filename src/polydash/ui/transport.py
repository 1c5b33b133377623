"""
Transport to the metrics endpoint

Posts JSON to the endpoint over HTTP and hands back (status, body).
"""

from typing import Any, Dict, Tuple

import requests

from ..config import Config
from ..exceptions import TransportError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class HttpTransport:
    """JSON-over-HTTP client for the metrics endpoint"""

    def __init__(self, base_url: str = None, timeout: int = None):
        self.base_url = (base_url or Config.API_BASE_URL).rstrip("/")
        self.timeout = timeout or Config.API_TIMEOUT
        self.session = requests.Session()

    def post_json(self, path: str, payload: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
        """
        POST payload as JSON.

        Args:
            path: Endpoint path (e.g. "/api/analyze")
            payload: JSON-serializable body

        Returns:
            (status code, decoded body); a body that isn't a JSON object
            comes back as {}

        Raises:
            TransportError: the request failed or the body wasn't JSON
        """
        url = f"{self.base_url}{path}"

        try:
            resp = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.Timeout:
            logger.error(f"Timed out posting to {url}")
            raise TransportError("Request to the metrics endpoint timed out")
        except requests.RequestException as e:
            logger.error(f"Failed to reach {url}: {e}")
            raise TransportError(f"Could not reach the metrics endpoint: {e}")

        try:
            body = resp.json()
        except ValueError:
            logger.error(f"Non-JSON response from {url} (status {resp.status_code})")
            raise TransportError(f"Unexpected response from server (status {resp.status_code})")

        return resp.status_code, body if isinstance(body, dict) else {}

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
