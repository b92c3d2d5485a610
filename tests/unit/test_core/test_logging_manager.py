"""
Unit tests for the opt-in logging setup.
"""

import logging
import logging.handlers

import pytest

from shipengine_api.core.config_manager import LoggingConfig
from shipengine_api.core.logging_manager import (
    LIBRARY_LOGGER,
    ColoredFormatter,
    LoggingManager,
    parse_file_size,
)


class TestLoggingManager:
    """Test suite for LoggingManager"""

    @pytest.mark.unit
    def test_library_logger_silent_by_default(self):
        handlers = logging.getLogger(LIBRARY_LOGGER).handlers

        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    @pytest.mark.unit
    def test_console_handler(self):
        logger = LoggingManager.setup(LoggingConfig(level="WARNING"))

        assert logger.name == LIBRARY_LOGGER
        assert logger.level == logging.WARNING
        console = [h for h in LoggingManager._handlers if isinstance(h.formatter, ColoredFormatter)]
        assert len(console) == 1

    @pytest.mark.unit
    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "shipengine.log"
        config = LoggingConfig(log_to_console=False, file_path=str(log_file), max_file_size="1KB", backup_count=2)

        logger = LoggingManager.setup(config)
        logging.getLogger("shipengine_api.api.client").info("sent request")

        file_handler = LoggingManager._handlers[0]
        assert isinstance(file_handler, logging.handlers.RotatingFileHandler)
        assert file_handler.maxBytes == 1024
        assert file_handler.backupCount == 2
        assert logger.level == logging.INFO
        file_handler.flush()
        assert "sent request" in log_file.read_text()

    @pytest.mark.unit
    def test_setup_replaces_previous_handlers(self):
        LoggingManager.setup()
        LoggingManager.setup()

        logger = logging.getLogger(LIBRARY_LOGGER)
        installed = [h for h in logger.handlers if h in LoggingManager._handlers]
        assert len(installed) == 1

    @pytest.mark.unit
    def test_set_log_level(self, tmp_path):
        LoggingManager.setup(LoggingConfig(file_path=str(tmp_path / "client.log")))

        LoggingManager.set_log_level("error")

        assert logging.getLogger(LIBRARY_LOGGER).level == logging.ERROR
        for handler in LoggingManager._handlers:
            expected = logging.DEBUG if isinstance(handler, logging.handlers.RotatingFileHandler) else logging.ERROR
            assert handler.level == expected

    @pytest.mark.unit
    def test_set_invalid_log_level(self):
        with pytest.raises(ValueError):
            LoggingManager.set_log_level("LOUD")

    @pytest.mark.unit
    def test_reset(self):
        LoggingManager.setup()
        LoggingManager.reset()

        assert LoggingManager._handlers == []
        handlers = logging.getLogger(LIBRARY_LOGGER).handlers
        assert all(isinstance(h, logging.NullHandler) for h in handlers)


class TestLoggingHelpers:
    """Test suite for formatter and size parsing"""

    @pytest.mark.unit
    @pytest.mark.parametrize("size, expected", [
        ("10KB", 10 * 1024),
        ("10MB", 10 * 1024 ** 2),
        ("1gb", 1024 ** 3),
    ])
    def test_parse_file_size(self, size, expected):
        assert parse_file_size(size) == expected

    @pytest.mark.unit
    def test_parse_invalid_file_size(self):
        with pytest.raises(ValueError):
            parse_file_size("10 bytes")

    @pytest.mark.unit
    def test_colored_formatter(self):
        record = logging.LogRecord("shipengine_api", logging.ERROR, __file__, 1, "boom", None, None)

        output = ColoredFormatter("%(message)s").format(record)

        assert output == "\033[31mboom\033[0m"
