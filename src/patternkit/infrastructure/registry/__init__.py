"""Infrastructure registry patterns."""

from .family_registry import FamilyRegistration, FamilyRegistry
from .template_registry import TemplateRegistry

__all__ = [
    'FamilyRegistration',
    'FamilyRegistry',
    'TemplateRegistry'
]
