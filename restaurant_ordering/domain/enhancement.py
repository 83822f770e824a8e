"""
Enhancement layers (decorators) around a meal.

Each layer owns the meal it wraps and only adds its own delta: a price
supplement, extra cooking minutes and a ``", with <label>"`` suffix.
Layers are immutable, so one base meal can sit under several independent
chains.
"""

from typing import ClassVar, List, Optional

from pydantic import ConfigDict

from restaurant_ordering.core.trace import Trace, resolve_trace
from restaurant_ordering.data.ordering_params import (
    BACON_LAYER,
    CHEESE_LAYER,
    SAUCE_LAYER,
)
from restaurant_ordering.domain.meal import Meal
from restaurant_ordering.errors import InvalidArgumentError


class EnhancedMeal(Meal):
    model_config = ConfigDict(frozen=True)

    LABEL: ClassVar[str]
    EXTRA_PRICE: ClassVar[float]
    EXTRA_MINUTES: ClassVar[int]
    PREPARATION: ClassVar[str]

    meal: Meal

    @classmethod
    def wrap(cls, meal: Meal, trace: Optional[Trace] = None) -> "EnhancedMeal":
        """Return ``meal`` wrapped in this layer.

        Raises:
            InvalidArgumentError: if ``meal`` is missing or is not a Meal.
        """
        if meal is None:
            raise InvalidArgumentError("Meal cannot be None")
        if not isinstance(meal, Meal):
            raise InvalidArgumentError(f"Cannot enhance {type(meal).__name__}: not a meal")
        resolve_trace(trace).record(
            f"Decorator: Adding {cls.LABEL} (+${cls.EXTRA_PRICE:.2f})"
        )
        return cls(meal=meal)

    @property
    def description(self) -> str:
        return f"{self.meal.description}, with {self.LABEL}"

    @property
    def price(self) -> float:
        return round(self.meal.price + self.EXTRA_PRICE, 2)

    @property
    def cooking_time(self) -> int:
        return self.meal.cooking_time + self.EXTRA_MINUTES

    def prepare(self) -> List[str]:
        return [*self.meal.prepare(), self.PREPARATION]


class WithCheese(EnhancedMeal):
    LABEL, EXTRA_PRICE, EXTRA_MINUTES, PREPARATION = CHEESE_LAYER


class WithBacon(EnhancedMeal):
    LABEL, EXTRA_PRICE, EXTRA_MINUTES, PREPARATION = BACON_LAYER


class WithSauce(EnhancedMeal):
    LABEL, EXTRA_PRICE, EXTRA_MINUTES, PREPARATION = SAUCE_LAYER

