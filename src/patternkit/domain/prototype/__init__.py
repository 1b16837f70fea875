"""Prototype cloning."""

from .exceptions import DuplicateTemplateError, TemplateValidationError, UnknownTemplateError
from .prototype import Prototype

__all__ = ["DuplicateTemplateError", "TemplateValidationError", "UnknownTemplateError", "Prototype"]
