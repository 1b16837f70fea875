from typing import List, Optional

from patternkit.domain.core.exceptions import (
    DuplicateRegistrationError,
    ResourceNotFoundError,
    ValidationError,
)


class DuplicateTemplateError(DuplicateRegistrationError):
    """Raised when a template key is registered twice."""
    def __init__(self, key: str):
        super().__init__("Template", key)
        self.key = key


class UnknownTemplateError(ResourceNotFoundError):
    """Raised when no template is registered under a key."""
    def __init__(self, key: str, available: Optional[List[str]] = None):
        super().__init__("Template", key, available)
        self.key = key


class TemplateValidationError(ValidationError):
    """Raised when an object cannot be registered as a template."""
    def __init__(self, key: str, reason: str):
        super().__init__(f"Template validation failed for {key}: {reason}")
        self.key = key
        self.reason = reason
