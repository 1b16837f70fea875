"""Main toolkit configuration schema."""
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError, field_validator

from patternkit.config.defaults import DEFAULT_MEAL_STEPS
from patternkit.config.schemas.logging_schema import LoggingConfig
from patternkit.domain.core.exceptions import ConfigurationError
from patternkit.domain.core.exceptions import ValidationError as DomainValidationError
from patternkit.domain.core.value_objects import validate_name


class CompositeConfig(BaseModel):
    """Rendering settings for composite trees."""

    indent: int = Field(2, description="Indent characters per tree level")
    indent_char: str = Field(" ", description="Character used for indentation")

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        """Validate indent width."""
        if v < 1:
            raise ValueError("Indent must be at least 1")
        return v

    @field_validator("indent_char")
    @classmethod
    def validate_indent_char(cls, v: str) -> str:
        """Validate indent character."""
        if len(v) != 1:
            raise ValueError("Indent character must be a single character")
        return v

    @property
    def indent_unit(self) -> str:
        return self.indent_char * self.indent


class BuilderConfig(BaseModel):
    """Stepwise assembly settings."""

    default_steps: List[str] = Field(
        default_factory=lambda: list(DEFAULT_MEAL_STEPS),
        description="Step order used when none is given",
    )

    @field_validator("default_steps")
    @classmethod
    def validate_default_steps(cls, v: List[str]) -> List[str]:
        """Validate the default step order."""
        if not v:
            raise ValueError("At least one build step is required")
        for step in v:
            try:
                validate_name("Step name", step)
            except DomainValidationError as e:
                raise ValueError(str(e)) from e
        return v


class ToolkitConfig(BaseModel):
    """Toolkit configuration."""

    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    composite: CompositeConfig = Field(default_factory=lambda: CompositeConfig())
    builder: BuilderConfig = Field(default_factory=lambda: BuilderConfig())


def validate_config(config: Dict[str, Any]) -> ToolkitConfig:
    """
    Validate raw configuration data.

    Args:
        config: Configuration dictionary

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    try:
        return ToolkitConfig.model_validate(config)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ConfigurationError(f"Invalid toolkit configuration: {e}", fields) from e
