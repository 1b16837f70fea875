"""Configuration package."""

from .defaults import DEFAULT_CONFIG, DEFAULT_MEAL_STEPS, LogLevel, LogRenderer
from .manager import ConfigurationManager
from .schemas import (
    BuilderConfig,
    CompositeConfig,
    LoggingConfig,
    ToolkitConfig,
    validate_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_MEAL_STEPS",
    "LogLevel",
    "LogRenderer",
    "ConfigurationManager",
    "BuilderConfig",
    "CompositeConfig",
    "LoggingConfig",
    "ToolkitConfig",
    "validate_config",
]
