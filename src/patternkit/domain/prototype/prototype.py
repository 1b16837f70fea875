"""Prototype interface."""
from abc import ABC, abstractmethod
from typing import TypeVar

P = TypeVar('P', bound='Prototype')


class Prototype(ABC):
    """An object that knows how to duplicate itself.

    ``clone`` must return a new object whose owned mutable state (lists, dicts,
    nested owned objects) is duplicated, not shared. Immutable scalars may be
    shared. Each concrete type spells out its own copy so a field added later
    is never silently shallow-copied.
    """

    @abstractmethod
    def clone(self: P) -> P:
        """Return an independent deep copy of this object."""
