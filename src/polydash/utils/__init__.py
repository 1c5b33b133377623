"""Utility functions for the Polymarket Dashboard"""

from .parsers import (
    extract_market_slug,
    is_polymarket_url,
)
from .logging import (
    setup_logging,
    get_logger,
    log_success,
    log_warning,
    log_error,
    log_info,
    log_debug,
)

__all__ = [
    # Parsers
    "extract_market_slug",
    "is_polymarket_url",
    # Logging
    "setup_logging",
    "get_logger",
    "log_success",
    "log_warning",
    "log_error",
    "log_info",
    "log_debug",
]
