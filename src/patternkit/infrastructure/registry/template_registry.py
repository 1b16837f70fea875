"""Template Registry - Registry pattern for prototype templates.

Stores fully configured objects under a key and hands out independent
copies, so callers get a pre-configured object without re-running the
construction logic that produced the template.
"""

from typing import Dict, List
import threading

from patternkit.domain.core.exceptions import InvariantViolationError
from patternkit.domain.core.value_objects import validate_name
from patternkit.domain.prototype import (
    DuplicateTemplateError,
    Prototype,
    TemplateValidationError,
    UnknownTemplateError,
)
from patternkit.helpers.logger import get_logger


class TemplateRegistry:
    """
    Registry of named prototype templates.

    Stored templates are never handed out directly; ``clone`` always returns a
    fresh copy produced by the template's own ``clone`` routine.
    """

    def __init__(self):
        """Initialize template registry."""
        self._templates: Dict[str, Prototype] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

        self.logger.debug("Template registry initialized")

    def register_template(self, key: str, template: Prototype) -> None:
        """
        Store a template under ``key``.

        Args:
            key: Template key
            template: Fully initialized prototype

        Raises:
            DuplicateTemplateError: If the key is already registered
            TemplateValidationError: If ``template`` cannot be cloned
        """
        validate_name("Template key", key)
        if not isinstance(template, Prototype):
            raise TemplateValidationError(
                key, f"{type(template).__name__} does not implement Prototype"
            )

        with self._registry_lock:
            if key in self._templates:
                self.logger.error("Duplicate template registration", template=key)
                raise DuplicateTemplateError(key)
            self._templates[key] = template

        self.logger.info("Registered template", template=key, type=type(template).__name__)

    def clone(self, key: str) -> Prototype:
        """
        Return an independent copy of the template stored under ``key``.

        Raises:
            UnknownTemplateError: If the key is not registered
            InvariantViolationError: If the template's clone returns itself
        """
        template = self._get_template(key)
        copy = template.clone()
        if copy is template:
            self.logger.error("Clone returned the stored template", template=key)
            raise InvariantViolationError(
                f"{type(template).__name__}.clone() returned the template itself"
            )
        self.logger.debug("Cloned template", template=key)
        return copy

    def get_registered_templates(self) -> List[str]:
        """
        Get list of registered template keys.

        Returns:
            Sorted list of template keys
        """
        with self._registry_lock:
            return sorted(self._templates)

    def is_registered(self, key: str) -> bool:
        """Check if a template key is registered."""
        with self._registry_lock:
            return key in self._templates

    def unregister(self, key: str) -> None:
        """
        Remove a template.

        Raises:
            UnknownTemplateError: If the key is not registered
        """
        with self._registry_lock:
            if key not in self._templates:
                raise UnknownTemplateError(key, sorted(self._templates))
            del self._templates[key]
        self.logger.info("Unregistered template", template=key)

    def clear_registrations(self) -> None:
        """
        Clear all templates.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._templates.clear()
            self.logger.debug("Cleared all template registrations")

    def _get_template(self, key: str) -> Prototype:
        with self._registry_lock:
            if key not in self._templates:
                raise UnknownTemplateError(key, sorted(self._templates))
            return self._templates[key]
