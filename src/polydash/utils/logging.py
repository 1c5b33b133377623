"""
Logging configuration for the Polymarket Dashboard

Provides console logging with colored levels and optional rotating file output.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

# Default format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"

ROOT_LOGGER = "polydash"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    name: str = ROOT_LOGGER
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file (enables file logging)
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(ColoredFormatter(LOG_FORMAT_SIMPLE))
    logger.addHandler(console)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5_000_000,  # 5MB
            backupCount=3
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level for terminal output"""

    # ANSI color codes
    COLORS = {
        logging.DEBUG: "\033[36m",     # Cyan
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelno, "")
        reset = self.RESET if color else ""
        return f"{color}{super().format(record)}{reset}"


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Module loggers are parented under the package logger so that
    setup_logging() configures them all.

    Args:
        name: Logger name (uses package logger if None)

    Returns:
        Logger instance
    """
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def log_success(message: str, logger: logging.Logger = None):
    """Log a success message with checkmark"""
    (logger or get_logger()).info(f"✅ {message}")


def log_warning(message: str, logger: logging.Logger = None):
    """Log a warning message"""
    (logger or get_logger()).warning(f"⚠️  {message}")


def log_error(message: str, logger: logging.Logger = None):
    """Log an error message"""
    (logger or get_logger()).error(f"❌ {message}")


def log_info(message: str, logger: logging.Logger = None):
    """Log an info message"""
    (logger or get_logger()).info(message)


def log_debug(message: str, logger: logging.Logger = None):
    """Log a debug message"""
    (logger or get_logger()).debug(message)
