"""
Config & Logging Test Suite
===========================
Tests for Config helpers and the logging setup.
"""
import logging

from polydash.config import Config
from polydash.utils.logging import (
    get_logger,
    log_debug,
    log_error,
    log_info,
    log_success,
    log_warning,
    setup_logging,
)


class TestConfig:
    """Tests for Config"""

    def test_as_dict_exports_settings(self):
        data = Config.as_dict()

        for key in ("HOST", "PORT", "API_BASE_URL", "ANALYZE_PATH", "API_TIMEOUT",
                    "MOCK_MESSAGE", "DASHBOARD_OUTPUT", "LOG_LEVEL", "LOG_FILE"):
            assert key in data
        assert data["ANALYZE_PATH"] == "/api/analyze"
        assert data["MOCK_MESSAGE"] == Config.MOCK_MESSAGE

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")
        assert Config.log_level() == logging.INFO

    def test_known_log_level(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
        assert Config.log_level() == logging.DEBUG

    def test_no_log_file_by_default(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_FILE", None)
        assert Config.log_path() is None


class TestLogging:
    """Tests for the logging helpers"""

    def test_module_loggers_live_under_package(self):
        assert get_logger("ui.view").name == "polydash.ui.view"
        assert get_logger("polydash.api").name == "polydash.api"
        assert get_logger().name == "polydash"

    def test_helpers_log_at_their_levels(self, caplog):
        logger = get_logger("tests")
        logger.setLevel(logging.DEBUG)

        with caplog.at_level(logging.DEBUG, logger="polydash"):
            log_success("done", logger)
            log_warning("careful", logger)
            log_error("broken", logger)
            log_info("fyi", logger)
            log_debug("details", logger)

        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert (logging.INFO, "✅ done") in levels
        assert (logging.WARNING, "⚠️  careful") in levels
        assert (logging.ERROR, "❌ broken") in levels
        assert (logging.INFO, "fyi") in levels
        assert (logging.DEBUG, "details") in levels

    def test_setup_logging_adds_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "polydash.log"
        logger = setup_logging(level=logging.INFO, log_file=log_file, name="polydash.test_setup")

        try:
            assert len(logger.handlers) == 2
            assert log_file.parent.exists()
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
