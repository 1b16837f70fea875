"""Unified configuration management for the toolkit."""
from __future__ import annotations
import copy
import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from patternkit.config.defaults import DEFAULT_CONFIG
from patternkit.config.schemas import (
    BuilderConfig,
    CompositeConfig,
    LoggingConfig,
    ToolkitConfig,
    validate_config,
)
from patternkit.config.utils.env_expansion import expand_config_env_vars

T = TypeVar('T')
logger = logging.getLogger(__name__)

_SECTIONS: Dict[Type, str] = {
    LoggingConfig: "logging",
    CompositeConfig: "composite",
    BuilderConfig: "builder",
}


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``overrides`` into a copy of ``base``, recursing into nested dicts."""
    result = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class ConfigurationManager:
    """
    Single source of truth for toolkit configuration.

    Configuration is built from ``DEFAULT_CONFIG``, with environment variable
    placeholders expanded, then caller overrides merged on top. The result is
    validated into a ``ToolkitConfig`` on first access and cached.
    """

    def __init__(self, overrides: Optional[Dict[str, Any]] = None):
        """Initialize configuration manager with lazy loading."""
        self._overrides = overrides or {}
        self._lock = threading.RLock()
        self._config: Optional[ToolkitConfig] = None

    def get_raw_config(self) -> Dict[str, Any]:
        """Get the merged configuration dictionary before validation."""
        return _deep_merge(expand_config_env_vars(DEFAULT_CONFIG), self._overrides)

    def get_config(self) -> ToolkitConfig:
        """
        Get the validated toolkit configuration.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        with self._lock:
            if self._config is None:
                self._config = validate_config(self.get_raw_config())
                logger.debug("Loaded toolkit configuration")
            return self._config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get one configuration section by its schema type."""
        section = _SECTIONS.get(config_type)
        if section is None:
            raise KeyError(f"Unknown configuration section type: {config_type.__name__}")
        return cast(T, getattr(self.get_config(), section))

    def reload(self) -> ToolkitConfig:
        """Drop the cached configuration and load it again."""
        with self._lock:
            self._config = None
        return self.get_config()
