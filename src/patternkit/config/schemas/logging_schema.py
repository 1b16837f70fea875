"""Logging configuration schema."""
from pydantic import BaseModel, Field, field_validator

from patternkit.config.defaults import LogLevel, LogRenderer


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Root log level")
    renderer: LogRenderer = Field(LogRenderer.CONSOLE, description="Console or JSON output")
    logger_name: str = Field("patternkit", description="Name of the toolkit's root logger")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("renderer", mode="before")
    @classmethod
    def normalize_renderer(cls, v):
        """Accept renderer names in any case."""
        if isinstance(v, str):
            return v.lower()
        return v
