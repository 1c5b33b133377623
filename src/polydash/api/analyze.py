"""
Metrics Endpoint

POST /api/analyze with {"url": "<market url>"} and get back the metrics
for that market.
"""

from flask import Blueprint, current_app, jsonify, request

from ..config import Config
from ..exceptions import MetricsUnavailableError
from ..utils.logging import get_logger, log_debug, log_error, log_info, log_warning
from ..utils.parsers import extract_market_slug, is_polymarket_url
from .providers import MockMetricsProvider

logger = get_logger(__name__)

bp = Blueprint("analyze", __name__)

INVALID_URL_ERROR = "Invalid URL"


def get_provider():
    """Metrics provider configured on the app, mock by default"""
    provider = current_app.config.get("METRICS_PROVIDER")
    if provider is None:
        provider = MockMetricsProvider()
        current_app.config["METRICS_PROVIDER"] = provider
    return provider


@bp.route(Config.ANALYZE_PATH, methods=["POST"])
def analyze_market():
    data = request.get_json(silent=True)
    url = data.get("url") if isinstance(data, dict) else None

    if not url or not isinstance(url, str):
        log_warning(f"Rejected analyze request with url={url!r}", logger)
        return jsonify({"error": INVALID_URL_ERROR}), 400

    log_info(f"Analyzing market {extract_market_slug(url) or url}", logger)
    if not is_polymarket_url(url):
        log_debug(f"{url} is not a polymarket.com URL", logger)

    try:
        metrics = get_provider().get_metrics(url)
    except MetricsUnavailableError as e:
        log_error(f"Metrics unavailable for {url}: {e}", logger)
        return jsonify({"error": str(e) or "Failed to retrieve market metrics"}), 500

    return jsonify({
        "url": url,
        "metrics": metrics.to_dict(),
        "message": Config.MOCK_MESSAGE,
    })
