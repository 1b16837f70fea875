# src/patternkit/domain/core/value_objects.py
from __future__ import annotations
from dataclasses import dataclass
import re

from patternkit.domain.core.exceptions import ValidationError

_NAME_PATTERN = re.compile(r'^[a-zA-Z0-9_-]+$')


def validate_name(kind: str, value: str) -> str:
    """Validate a registry key or role name and return it unchanged."""
    if not isinstance(value, str):
        raise ValidationError(f"{kind} must be a string")
    if not _NAME_PATTERN.match(value):
        raise ValidationError(f"Invalid {kind.lower()} format: {value!r}")
    return value


@dataclass(frozen=True)
class Role:
    """Abstract capability fulfilled by one product per family."""
    name: str

    def __post_init__(self):
        validate_name("Role name", self.name)

    @classmethod
    def of(cls, value: "Role | str") -> Role:
        if isinstance(value, Role):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.name
