"""Furniture families: modern and victorian chairs and sofas."""
from typing import Literal

from pydantic import Field

from patternkit.domain.family import Product, RoleTableFactory
from patternkit.infrastructure.registry import FamilyRegistry

CHAIR = "chair"
SOFA = "sofa"


class Chair(Product):
    """Something to sit on."""
    role: Literal["chair"] = CHAIR
    legs: int = Field(4, ge=0)

    def describe(self) -> str:
        return f"Sitting on a {self.family} chair."


class Sofa(Product):
    """Something to lie on."""
    role: Literal["sofa"] = SOFA
    seats: int = Field(3, ge=1)

    def describe(self) -> str:
        return f"Lying on a {self.family} sofa."


class ModernChair(Chair):
    family: Literal["modern"] = "modern"
    legs: int = Field(1, ge=0)


class ModernSofa(Sofa):
    family: Literal["modern"] = "modern"
    seats: int = Field(2, ge=1)


class VictorianChair(Chair):
    family: Literal["victorian"] = "victorian"


class VictorianSofa(Sofa):
    family: Literal["victorian"] = "victorian"
    seats: int = Field(3, ge=1)


class ModernFurnitureFactory(RoleTableFactory):
    """Creates matching modern furniture."""
    constructors = {CHAIR: ModernChair, SOFA: ModernSofa}


class VictorianFurnitureFactory(RoleTableFactory):
    """Creates matching victorian furniture."""
    constructors = {CHAIR: VictorianChair, SOFA: VictorianSofa}


def register_furniture_families(registry: FamilyRegistry) -> None:
    """Register the ``modern`` and ``victorian`` furniture families."""
    registry.register_family("modern", ModernFurnitureFactory())
    registry.register_family("victorian", VictorianFurnitureFactory())
