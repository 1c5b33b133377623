"""Dashboard view, transport and HTML rendering"""

from .view import DashboardState, DashboardView
from .transport import HttpTransport
from .dashboard import (
    DashboardDisplay,
    build_display,
    generate_html_dashboard,
    write_html_dashboard,
)

__all__ = [
    "DashboardState",
    "DashboardView",
    "HttpTransport",
    "DashboardDisplay",
    "build_display",
    "generate_html_dashboard",
    "write_html_dashboard",
]
