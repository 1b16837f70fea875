"""Meal builders driven by the stepwise assembler."""
from typing import ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict

from patternkit.config.defaults import DEFAULT_MEAL_STEPS
from patternkit.domain.builder import Builder, BuildSpec

MEAL_STEPS = BuildSpec(tuple(DEFAULT_MEAL_STEPS))


class Meal(BaseModel):
    """Finished meal. Fields left unset by the builder stay ``None``."""
    model_config = ConfigDict(frozen=True)

    main_course: Optional[str] = None
    side_dish: Optional[str] = None
    drink: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return None not in (self.main_course, self.side_dish, self.drink)

    def describe(self) -> str:
        items = [item for item in (self.main_course, self.side_dish, self.drink) if item]
        if not items:
            return "Empty meal"
        return "Meal: " + ", ".join(items)


class MealBuilder(Builder):
    """Base meal builder; subclasses pick the items for each course."""

    main_course_item: ClassVar[Optional[str]] = None
    side_dish_item: ClassVar[Optional[str]] = None
    drink_item: ClassVar[Optional[str]] = None

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._draft: Dict[str, str] = {}

    def main_course(self) -> None:
        self._set("main_course", self.main_course_item)

    def side_dish(self) -> None:
        self._set("side_dish", self.side_dish_item)

    def drink(self) -> None:
        self._set("drink", self.drink_item)

    def get_product(self) -> Meal:
        return Meal(**self._draft)

    def _set(self, course: str, item: Optional[str]) -> None:
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"Invalid {course.replace('_', ' ')}: {item!r}")
        self._draft[course] = item.strip()


class VegMealBuilder(MealBuilder):
    main_course_item = "Veggie Burger"
    side_dish_item = "Fries"
    drink_item = "Juice"


class NonVegMealBuilder(MealBuilder):
    main_course_item = "Chicken Burger"
    side_dish_item = "Fries"
    drink_item = "Cola"


class CustomMealBuilder(MealBuilder):
    """Builds a meal from caller supplied items, validated when each step runs."""

    def __init__(self, main_course: Optional[str] = None, side_dish: Optional[str] = None,
                 drink: Optional[str] = None):
        super().__init__()
        self.main_course_item = main_course
        self.side_dish_item = side_dish
        self.drink_item = drink
