"""Configuration Management for the ShipEngine client

Loads client settings from hierarchical YAML files and environment variables
and validates them with pydantic.
"""

import os
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from .error_handler import ConfigurationError

DEFAULT_BASE_URL = "https://api.shipengine.com"


class APIConfig(BaseModel):
    """Configuration for the ShipEngine HTTP API."""
    api_key: Optional[SecretStr] = None
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: int = Field(default=30, ge=1, le=300)
    verify_ssl: bool = Field(default=True)
    proxy_url: Optional[str] = None
    user_agent: str = Field(default="shipengine-api-client/1.0.0")

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Validate base URL scheme"""
        if not v.startswith(('http://', 'https://')):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip('/')


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_to_console: bool = Field(default=True)
    file_path: Optional[str] = None
    max_file_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=1, le=20)

    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('max_file_size')
    @classmethod
    def validate_file_size(cls, v):
        """Validate file size format"""
        import re
        if not re.match(r'^\d+[KMG]B$', v.upper()):
            raise ValueError("File size must be in format: 10KB, 10MB, or 1GB")
        return v.upper()


class ShipEngineConfig(BaseModel):
    """Top-level client configuration."""
    environment: str = Field(default="production")
    api: APIConfig = Field(default_factory=APIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages client configuration loading and validation."""

    ENV_PREFIX = "SHIPENGINE_"
    API_KEY_ENV = "SHIPENGINE_API_KEY"
    SENSITIVE_FIELDS = {'api.api_key'}
    SECTION_MODELS = {'api': APIConfig, 'logging': LoggingConfig}
    TEXT_ANNOTATIONS = (str, Optional[str], SecretStr, Optional[SecretStr])

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional directory holding the YAML configuration files
            environment: Environment name, selects ``<environment>.yaml``
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv('SHIPENGINE_ENV', 'production')
        self._config: Optional[ShipEngineConfig] = None
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        config_locations = [
            Path("config"),
            Path.home() / ".shipengine",
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'
        }

    def load_config(self, reload: bool = False) -> ShipEngineConfig:
        """Load and validate configuration with hierarchical overrides.

        Later files override earlier ones and environment variables override
        every file.

        Returns:
            Validated client configuration

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        with self._lock:
            if self._config and not reload:
                return self._config

            config_data: Dict[str, Any] = {'environment': self.environment}

            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.info(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {list(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            try:
                self._config = ShipEngineConfig(**config_data)
            except ValidationError as e:
                self.logger.error(f"Configuration validation failed: {e}")
                raise ConfigurationError(f"Invalid configuration: {e}") from e

            return self._config

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file."""
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration in {file_path} must be a mapping")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: SHIPENGINE_<SECTION>_<KEY>
        Example: SHIPENGINE_API_BASE_URL -> api.base_url
        ``SHIPENGINE_API_KEY`` is a shortcut for api.api_key.
        """
        overrides: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if key == self.API_KEY_ENV:
                overrides.setdefault('api', {})['api_key'] = value
                continue
            if not key.startswith(self.ENV_PREFIX):
                continue

            section, _, field = key[len(self.ENV_PREFIX):].lower().partition('_')
            if section not in self.SECTION_MODELS or not field:
                continue

            if self._is_text_field(section, field):
                overrides.setdefault(section, {})[field] = value
            else:
                overrides.setdefault(section, {})[field] = self._convert_env_value(value)

        return overrides

    def _is_text_field(self, section: str, field: str) -> bool:
        """True for settings that must stay strings, such as user_agent or api_key."""
        field_info = self.SECTION_MODELS[section].model_fields.get(field)
        if field_info is None:
            return False
        return field_info.annotation in self.TEXT_ANNOTATIONS

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value

    def _remove_sensitive_data(self, config_dict: Dict[str, Any]):
        """Remove sensitive data from configuration dictionary."""
        for field_path in self.SENSITIVE_FIELDS:
            parts = field_path.split('.')
            current = config_dict

            for part in parts[:-1]:
                if part in current:
                    current = current[part]
                else:
                    break

            if parts[-1] in current:
                current[parts[-1]] = None

    def save_config(self, target: str = "local") -> Path:
        """Save current configuration to file, without credentials.

        Args:
            target: Which config file to save to ('default', 'environment', 'local')

        Returns:
            Path of the written file
        """
        with self._lock:
            if not self._config:
                raise ConfigurationError("No configuration loaded")

            if target not in self.config_files:
                raise ConfigurationError(f"Invalid target: {target}")

            config_dict = self._config.model_dump()
            self._remove_sensitive_data(config_dict)

            target_file = self.config_files[target]
            target_file.parent.mkdir(parents=True, exist_ok=True)

            with open(target_file, 'w') as f:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

            self.logger.info(f"Configuration saved to {target_file}")
            return target_file

    @property
    def config(self) -> ShipEngineConfig:
        """Current configuration, loading it on first access."""
        return self._config or self.load_config()
