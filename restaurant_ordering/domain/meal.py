from abc import abstractmethod
from enum import Enum
from typing import ClassVar, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class MealType(str, Enum):
    # Values aligned with the keys of data/meals.json
    PIZZA = "PIZZA"
    BURGER = "BURGER"
    SALAD = "SALAD"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Meal(BaseModel):
    """Anything the restaurant can serve: a description, a price and a cooking time.

    Meals are immutable once built.  ``prepare`` only describes the work,
    it never changes the meal.
    """

    model_config = ConfigDict(frozen=True)

    @property
    @abstractmethod
    def description(self) -> str: ...

    @property
    @abstractmethod
    def price(self) -> float: ...

    @property
    @abstractmethod
    def cooking_time(self) -> int: ...

    @abstractmethod
    def prepare(self) -> List[str]: ...


class MealSpec(BaseModel):
    """Catalog entry for a ready-made meal (one value of data/meals.json)."""

    name: str
    base_price: float = Field(ge=0)
    minutes: int = Field(ge=0)
    steps: Tuple[str, ...] = ()


class CatalogMeal(MealSpec, Meal):
    """A ready-made meal whose values come straight from the catalog."""

    model_config = ConfigDict(frozen=True)

    MEAL_TYPE: ClassVar[MealType]

    @property
    def description(self) -> str:
        return self.name

    @property
    def price(self) -> float:
        return self.base_price

    @property
    def cooking_time(self) -> int:
        return self.minutes

    def prepare(self) -> List[str]:
        return [f"Preparing {self.MEAL_TYPE.label}...", *self.steps]


class Pizza(CatalogMeal):
    MEAL_TYPE: ClassVar[MealType] = MealType.PIZZA


class Burger(CatalogMeal):
    MEAL_TYPE: ClassVar[MealType] = MealType.BURGER


class Salad(CatalogMeal):
    MEAL_TYPE: ClassVar[MealType] = MealType.SALAD
