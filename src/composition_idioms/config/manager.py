"""Unified configuration management for the library."""
from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from composition_idioms.config.schemas import AppConfig
from composition_idioms.domain.core.exceptions import ConfigurationError
from composition_idioms.infrastructure.patterns.singleton_access import get_singleton

T = TypeVar("T", bound=BaseModel)

CONFIG_FILE_ENV = "IDIOMS_CONFIG_FILE"

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "IDIOMS_LOG_LEVEL": ("logging", "level"),
    "IDIOMS_LOG_FORMAT": ("logging", "format"),
    "IDIOMS_LOG_FILE": ("logging", "file_path"),
    "IDIOMS_DEFAULT_VEHICLE_TYPE": ("factory", "default_vehicle_type"),
}

logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Single source of truth for library configuration.

    Sources are merged in order: schema defaults, then a JSON or YAML file,
    then environment overrides. Loading is lazy and thread-safe.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_app_config(self) -> AppConfig:
        return self.app_config

    def get_typed(self, config_class: Type[T]) -> T:
        """
        Get the configuration section whose schema is ``config_class``.

        Raises:
            ConfigurationError: If no section of AppConfig has that type
        """
        with self._lock:
            if config_class in self._config_cache:
                return self._config_cache[config_class]

            app_config = self.app_config
            if isinstance(app_config, config_class):
                section: Any = app_config
            else:
                section = self._find_section(app_config, config_class)
            if section is None:
                raise ConfigurationError(
                    f"No configuration section of type {config_class.__name__}"
                )
            self._config_cache[config_class] = section
            return section

    def reload(self) -> AppConfig:
        """Discard cached values and load again from every source."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
            return self.app_config

    def _find_section(self, model: BaseModel, config_class: Type[T]) -> Optional[T]:
        for name in type(model).model_fields:
            value = getattr(model, name)
            if isinstance(value, config_class):
                return value
            if isinstance(value, BaseModel):
                nested = self._find_section(value, config_class)
                if nested is not None:
                    return nested
        return None

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        data: Dict[str, Any] = {}
        if self._config_file:
            data = self._read_config_file(self._config_file)

        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                current = data.get(section)
                if current is None:
                    current = data[section] = {}
                elif not isinstance(current, dict):
                    raise ConfigurationError(f"Section '{section}' must be a mapping")
                current[key] = value

        try:
            config = AppConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        logger.debug(
            "Configuration loaded from %s (default vehicle type: %s)",
            self._config_file or "defaults",
            config.factory.default_vehicle_type,
        )
        return config

    def _read_config_file(self, config_file: str) -> Dict[str, Any]:
        path = Path(os.path.expandvars(config_file))
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping at the top level"
            )
        return data


def get_config_manager() -> ConfigurationManager:
    """Get the process-wide configuration manager."""
    return get_singleton(ConfigurationManager)
