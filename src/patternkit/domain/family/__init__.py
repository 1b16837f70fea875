"""Product families: roles, products and the factories that create them."""

from .exceptions import DuplicateFamilyError, FamilyConstructionError, UnknownFamilyError
from .factory import FamilyFactory, ProductConstructor, RoleTableFactory
from .family import ProductFamily
from .product import Product

__all__ = [
    "DuplicateFamilyError",
    "FamilyConstructionError",
    "UnknownFamilyError",
    "FamilyFactory",
    "ProductConstructor",
    "RoleTableFactory",
    "ProductFamily",
    "Product",
]
