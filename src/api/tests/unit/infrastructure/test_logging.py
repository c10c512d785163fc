"""Unit tests for structlog configuration."""

from unittest.mock import patch

import structlog

from infrastructure.logging import configure_logging
from infrastructure.settings import LoggingSettings


class TestConfigureLogging:
    """Tests for configure_logging."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_uses_json_renderer_without_tty(self):
        with patch("sys.stdout.isatty", return_value=False):
            configure_logging(LoggingSettings(level="INFO", force_color=False))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_force_color_uses_console_renderer(self):
        with patch("sys.stdout.isatty", return_value=False):
            configure_logging(LoggingSettings(level="INFO", force_color=True))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_filters_below_configured_level(self):
        with patch("sys.stdout.isatty", return_value=False):
            configure_logging(LoggingSettings(level="WARNING"))

        wrapper_class = structlog.get_config()["wrapper_class"]
        assert wrapper_class is structlog.make_filtering_bound_logger(30)
