"""Shared kernel: exceptions and value objects used by every component."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    DuplicateRegistrationError,
    InvariantViolationError,
    ResourceNotFoundError,
    ValidationError,
)
from .value_objects import Role, validate_name

__all__ = [
    "ConfigurationError",
    "DomainException",
    "DuplicateRegistrationError",
    "InvariantViolationError",
    "ResourceNotFoundError",
    "ValidationError",
    "Role",
    "validate_name",
]
