"""Configuration schemas package."""

from .logging_schema import LoggingConfig
from .toolkit_schema import BuilderConfig, CompositeConfig, ToolkitConfig, validate_config

__all__ = [
    "ToolkitConfig",
    "validate_config",
    "LoggingConfig",
    "CompositeConfig",
    "BuilderConfig",
]
