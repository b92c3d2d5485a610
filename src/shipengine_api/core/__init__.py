"""Core modules for the ShipEngine client.

Configuration, logging, the error hierarchy and the base class shared by all
wire-mapped domain objects.
"""

from .config_manager import APIConfig, ConfigManager, LoggingConfig, ShipEngineConfig
from .entity import ApiObject
from .error_handler import (
    ShipEngineError,
    ConfigurationError,
    ArgumentError,
    ResponseProcessingError,
    APIError,
    ErrorSeverity
)
from .logging_manager import LoggingManager

__all__ = [
    "APIConfig",
    "ApiObject",
    "ConfigManager",
    "LoggingConfig",
    "ShipEngineConfig",
    "ShipEngineError",
    "ConfigurationError",
    "ArgumentError",
    "ResponseProcessingError",
    "APIError",
    "ErrorSeverity",
    "LoggingManager"
]
