"""Logging setup for the ShipEngine client.

The library only creates loggers. Applications that want the SDK's own
console/file output opt in through ``LoggingManager.setup``.
"""

import logging
import logging.handlers
import re
import sys
from pathlib import Path
from typing import Optional

from .config_manager import LoggingConfig

LIBRARY_LOGGER = 'shipengine_api'

logging.getLogger(LIBRARY_LOGGER).addHandler(logging.NullHandler())


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'        # Reset
    }

    def format(self, record):
        """Format log record with colors for console output."""
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


def parse_file_size(size: str) -> int:
    """Convert a size such as ``10MB`` into bytes."""
    match = re.match(r'^(\d+)([KMG])B$', size.strip().upper())
    if not match:
        raise ValueError(f"Invalid file size: {size}")
    multiplier = {'K': 1024, 'M': 1024 ** 2, 'G': 1024 ** 3}[match.group(2)]
    return int(match.group(1)) * multiplier


class LoggingManager:
    """Attaches handlers to the library logger according to ``LoggingConfig``."""

    _handlers = []

    @classmethod
    def setup(cls, config: Optional[LoggingConfig] = None) -> logging.Logger:
        """Configure the ``shipengine_api`` logger.

        Calling it again replaces the handlers installed by the previous call.

        Args:
            config: Logging settings, defaults apply when omitted

        Returns:
            The configured library logger
        """
        config = config or LoggingConfig()
        logger = logging.getLogger(LIBRARY_LOGGER)
        cls.reset()

        level = getattr(logging, config.level)
        logger.setLevel(level)

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(ColoredFormatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
                datefmt='%H:%M:%S'
            ))
            cls._add_handler(logger, console_handler)

        if config.file_path:
            log_file = Path(config.file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=parse_file_size(config.max_file_size),
                backupCount=config.backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            cls._add_handler(logger, file_handler)

        return logger

    @classmethod
    def _add_handler(cls, logger: logging.Logger, handler: logging.Handler):
        logger.addHandler(handler)
        cls._handlers.append(handler)

    @classmethod
    def set_log_level(cls, level: str):
        """Set the logging level for the library logger and console handlers.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')

        logging.getLogger(LIBRARY_LOGGER).setLevel(numeric_level)
        for handler in cls._handlers:
            if not isinstance(handler, logging.handlers.RotatingFileHandler):
                handler.setLevel(numeric_level)

    @classmethod
    def reset(cls):
        """Remove every handler installed by ``setup``."""
        logger = logging.getLogger(LIBRARY_LOGGER)
        for handler in cls._handlers:
            logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
