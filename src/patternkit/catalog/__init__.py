"""Sample products: furniture families, meal builders, document templates and staff."""

from .documents import Author, Document, Section
from .furniture import (
    CHAIR,
    SOFA,
    Chair,
    ModernChair,
    ModernFurnitureFactory,
    ModernSofa,
    Sofa,
    VictorianChair,
    VictorianFurnitureFactory,
    VictorianSofa,
    register_furniture_families,
)
from .meals import MEAL_STEPS, CustomMealBuilder, Meal, MealBuilder, NonVegMealBuilder, VegMealBuilder
from .staff import Employee

__all__ = [
    "Author",
    "Document",
    "Section",
    "CHAIR",
    "SOFA",
    "Chair",
    "ModernChair",
    "ModernFurnitureFactory",
    "ModernSofa",
    "Sofa",
    "VictorianChair",
    "VictorianFurnitureFactory",
    "VictorianSofa",
    "register_furniture_families",
    "MEAL_STEPS",
    "CustomMealBuilder",
    "Meal",
    "MealBuilder",
    "NonVegMealBuilder",
    "VegMealBuilder",
    "Employee",
]
