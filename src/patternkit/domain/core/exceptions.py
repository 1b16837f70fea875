# src/patternkit/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str, available: Optional[List[str]] = None):
        message = f"{resource_type} '{resource_id}' is not registered"
        if available is not None:
            message = f"{message}. Available: {available}"
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.available = available or []


class DuplicateRegistrationError(DomainException):
    """Raised when a registration key is already taken."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} '{resource_id}' is already registered")
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvariantViolationError(DomainException):
    """Raised when a domain invariant does not hold."""
    pass


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
