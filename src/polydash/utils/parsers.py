"""
Parsing utilities for the Polymarket Dashboard

Helpers for picking apart market URLs submitted to the dashboard.
"""

from typing import Optional
from urllib.parse import urlparse


POLYMARKET_HOSTS = ("polymarket.com", "www.polymarket.com")

# Path segments that precede a slug in Polymarket URLs
SLUG_MARKERS = ("event", "market")


def extract_market_slug(url: str) -> Optional[str]:
    """
    Extract the event or market slug from a Polymarket URL.

    Args:
        url: Full Polymarket URL

    Returns:
        Slug or None if not found

    Examples:
        >>> extract_market_slug("https://polymarket.com/event/zama-fdv-above")
        'zama-fdv-above'
        >>> extract_market_slug("https://polymarket.com/market/example")
        'example'
    """
    if not url:
        return None

    try:
        parsed = urlparse(url)
    except ValueError:
        return None

    parts = [p for p in parsed.path.split("/") if p]
    for idx, part in enumerate(parts[:-1]):
        if part in SLUG_MARKERS:
            return parts[idx + 1]

    return None


def is_polymarket_url(url: str) -> bool:
    """
    Check whether a URL points at polymarket.com.

    Examples:
        >>> is_polymarket_url("https://polymarket.com/market/example")
        True
        >>> is_polymarket_url("https://example.com/market/example")
        False
    """
    if not url:
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    return parsed.scheme in ("http", "https") and parsed.netloc.lower() in POLYMARKET_HOSTS
