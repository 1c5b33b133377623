"""Polymarket Dashboard: market metrics endpoint and single-page dashboard"""

from .config import Config
from .models import MarketMetrics
from .app import create_app

__version__ = "0.1.0"

__all__ = [
    "Config",
    "MarketMetrics",
    "create_app",
]
