"""
Web app

Serves the dashboard page and the metrics endpoint from one Flask app.
"""

from flask import Blueprint, Flask, current_app, request

from .api.analyze import bp as analyze_bp
from .api.providers import MetricsProvider
from .ui.dashboard import generate_html_dashboard
from .ui.transport import HttpTransport
from .ui.view import DashboardState, DashboardView
from .utils.logging import get_logger

logger = get_logger(__name__)

pages = Blueprint("pages", __name__)


@pages.route("/", methods=["GET"])
def index():
    return generate_html_dashboard(DashboardState())


@pages.route("/", methods=["POST"])
def submit():
    url = request.form.get("url", "").strip()

    # The page reaches the metrics endpoint over HTTP like any other client
    transport = current_app.config.get("DASHBOARD_TRANSPORT")
    if transport is not None:
        state = DashboardView(transport, url=url).analyze()
    else:
        base_url = current_app.config.get("API_BASE_URL") or request.host_url
        with HttpTransport(base_url) as transport:
            state = DashboardView(transport, url=url).analyze()

    return generate_html_dashboard(state)


def create_app(provider: MetricsProvider = None, **config) -> Flask:
    """
    Build the dashboard app.

    Args:
        provider: Metrics provider for the endpoint (mock when None)
        **config: Extra Flask config (e.g. API_BASE_URL, DASHBOARD_TRANSPORT)
    """
    app = Flask(__name__)
    app.config["METRICS_PROVIDER"] = provider
    app.config.update(config)

    app.register_blueprint(analyze_bp)
    app.register_blueprint(pages)

    logger.debug(f"App created with {type(provider).__name__ if provider else 'mock provider'}")
    return app
