"""Immutable bundle of products created together by one factory call."""
from typing import Dict, Iterator, Mapping, Union

from patternkit.domain.core.exceptions import ValidationError
from patternkit.domain.core.value_objects import Role
from patternkit.domain.family.product import Product


class ProductFamily(Mapping[Role, Product]):
    """Read-only mapping of role to product, all tagged with the same family.

    Lookups accept either a ``Role`` or its plain name::

        bundle["chair"] is bundle[Role("chair")]
    """

    def __init__(self, family: str, products: Mapping[Role, Product]):
        self._family = family
        self._products: Dict[Role, Product] = dict(products)

    @property
    def family(self) -> str:
        return self._family

    def __getitem__(self, role: Union[Role, str]) -> Product:
        try:
            key = Role.of(role)
        except ValidationError:
            raise KeyError(role) from None
        return self._products[key]

    def __iter__(self) -> Iterator[Role]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, role: object) -> bool:
        if isinstance(role, (Role, str)):
            try:
                return Role.of(role) in self._products
            except ValidationError:
                return False
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductFamily):
            return NotImplemented
        return self._family == other._family and self._products == other._products

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        roles = ", ".join(r.name for r in self._products)
        return f"ProductFamily(family='{self._family}', roles=[{roles}])"
