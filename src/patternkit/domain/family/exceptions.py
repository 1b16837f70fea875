from patternkit.domain.core.exceptions import (
    DomainException,
    DuplicateRegistrationError,
    ResourceNotFoundError,
)
from typing import List, Optional


class DuplicateFamilyError(DuplicateRegistrationError):
    """Raised when a family name is registered twice."""
    def __init__(self, family: str):
        super().__init__("Family", family)
        self.family = family


class UnknownFamilyError(ResourceNotFoundError):
    """Raised when a family name has no registered factory."""
    def __init__(self, family: str, available: Optional[List[str]] = None):
        super().__init__("Family", family, available)
        self.family = family


class FamilyConstructionError(DomainException):
    """Raised when one role of a family cannot be constructed.

    The whole family is discarded; ``cause`` carries the underlying error.
    """
    def __init__(self, family: str, role: str, cause: Exception):
        super().__init__(f"Failed to construct role '{role}' of family '{family}': {cause}")
        self.family = family
        self.role = role
        self.cause = cause
