"""Factory interface for product families."""
from abc import ABC, abstractmethod
from typing import Callable, Dict, Mapping, Optional, Tuple

from patternkit.domain.core.exceptions import ValidationError
from patternkit.domain.core.value_objects import Role
from patternkit.domain.family.product import Product

ProductConstructor = Callable[[], Product]


class FamilyFactory(ABC):
    """Produces one product per declared role, all belonging to one family."""

    @property
    @abstractmethod
    def roles(self) -> Tuple[Role, ...]:
        """Roles this factory produces, in creation order."""

    @abstractmethod
    def create(self, role: Role) -> Product:
        """Create the product fulfilling ``role``."""


class RoleTableFactory(FamilyFactory):
    """Family factory backed by a table of role name -> constructor.

    Subclasses may declare ``constructors`` at class level, or callers can pass
    a mapping directly.
    """

    constructors: Mapping[str, ProductConstructor] = {}

    def __init__(self, constructors: Optional[Mapping[str, ProductConstructor]] = None):
        table = dict(constructors if constructors is not None else self.constructors)
        if not table:
            raise ValidationError(f"{type(self).__name__} declares no roles")
        self._constructors: Dict[Role, ProductConstructor] = {}
        for name, constructor in table.items():
            if not callable(constructor):
                raise ValidationError(f"Constructor for role '{name}' is not callable")
            self._constructors[Role(name)] = constructor

    @property
    def roles(self) -> Tuple[Role, ...]:
        return tuple(self._constructors)

    def create(self, role: Role) -> Product:
        try:
            constructor = self._constructors[Role.of(role)]
        except KeyError:
            raise ValidationError(f"{type(self).__name__} has no role '{role}'") from None
        return constructor()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(roles={[r.name for r in self.roles]})"
