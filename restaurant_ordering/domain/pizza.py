from typing import List, Tuple

from pydantic import ConfigDict, Field

from restaurant_ordering.data.ordering_params import (
    PIZZA_BASE_MINUTES,
    PIZZA_BASE_PRICE,
    PIZZA_MINUTES_PER_TOPPING,
    PIZZA_TOPPING_PRICE,
)
from restaurant_ordering.domain.meal import Meal


class CustomPizza(Meal):
    """A pizza assembled topping by topping.

    Only ``PizzaBuilder`` is expected to create these.  Price and cooking
    time are derived from the number of toppings.

    Formula
    -------
    price = PIZZA_BASE_PRICE + PIZZA_TOPPING_PRICE x len(toppings)
    cooking_time = PIZZA_BASE_MINUTES + PIZZA_MINUTES_PER_TOPPING x len(toppings)

    Example
    -------
    >>> p = CustomPizza(dough="Thin Crust", sauce="BBQ Sauce", toppings=("Chicken", "Onions"))
    >>> p.price, p.cooking_time
    (13.99, 17)
    """

    model_config = ConfigDict(frozen=True)

    dough: str = Field(min_length=1)
    sauce: str = Field(min_length=1)
    toppings: Tuple[str, ...] = ()

    @property
    def description(self) -> str:
        return (
            f"Custom Pizza with {self.dough}, {self.sauce}"
            f" and {len(self.toppings)} toppings"
        )

    @property
    def price(self) -> float:
        return round(PIZZA_BASE_PRICE + len(self.toppings) * PIZZA_TOPPING_PRICE, 2)

    @property
    def cooking_time(self) -> int:
        return PIZZA_BASE_MINUTES + len(self.toppings) * PIZZA_MINUTES_PER_TOPPING

    def prepare(self) -> List[str]:
        return [
            "Preparing Custom Pizza:",
            f"- Dough: {self.dough}",
            f"- Sauce: {self.sauce}",
            f"- Toppings: {', '.join(self.toppings)}",
        ]
