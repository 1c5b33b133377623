"""
Centralized configuration for the Polymarket Dashboard

Server address, API paths and display constants in one place.
Supports environment variables via .env file.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Base paths
    BASE_DIR = Path(__file__).parent.parent.parent  # Project root

    # Web server
    HOST = os.getenv("POLYDASH_HOST", "127.0.0.1")
    PORT = int(os.getenv("POLYDASH_PORT", "5000"))

    # Metrics endpoint
    API_BASE_URL = os.getenv("POLYDASH_API_BASE_URL", f"http://{HOST}:{PORT}")
    ANALYZE_PATH = "/api/analyze"
    API_TIMEOUT = int(os.getenv("POLYDASH_API_TIMEOUT", "30"))
    MOCK_MESSAGE = "This is a mock response. Integrate with your backend for real data."

    # Output
    DASHBOARD_OUTPUT = Path(os.getenv("POLYDASH_OUTPUT", str(BASE_DIR / "dashboard.html")))

    # Logging
    LOG_LEVEL = os.getenv("POLYDASH_LOG_LEVEL", "INFO").upper()
    LOG_FILE = os.getenv("POLYDASH_LOG_FILE") or None

    @classmethod
    def log_level(cls) -> int:
        """Resolve LOG_LEVEL to a logging constant, falling back to INFO"""
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def log_path(cls):
        """Path of the log file, or None when file logging is off"""
        return Path(cls.LOG_FILE) if cls.LOG_FILE else None

    @classmethod
    def as_dict(cls) -> dict:
        """Export config as dictionary (useful for debugging)"""
        return {
            "BASE_DIR": str(cls.BASE_DIR),
            "HOST": cls.HOST,
            "PORT": cls.PORT,
            "API_BASE_URL": cls.API_BASE_URL,
            "ANALYZE_PATH": cls.ANALYZE_PATH,
            "API_TIMEOUT": cls.API_TIMEOUT,
            "MOCK_MESSAGE": cls.MOCK_MESSAGE,
            "DASHBOARD_OUTPUT": str(cls.DASHBOARD_OUTPUT),
            "LOG_LEVEL": cls.LOG_LEVEL,
            "LOG_FILE": cls.LOG_FILE,
        }
