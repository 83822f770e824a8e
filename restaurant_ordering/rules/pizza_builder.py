from typing import List, Optional

from restaurant_ordering.core.trace import Trace, resolve_trace
from restaurant_ordering.domain.pizza import CustomPizza
from restaurant_ordering.errors import InvalidStateError


class PizzaBuilder:
    """Assemble a ``CustomPizza`` step by step.

    Every setter returns the builder so calls can be chained::

        pizza = (
            PizzaBuilder()
            .set_dough("Thin Crust")
            .set_sauce("BBQ Sauce")
            .add_topping("Chicken")
            .build()
        )

    ``build`` does not reset the builder: building again after more
    toppings gives a second, independent pizza.
    """

    def __init__(self, trace: Optional[Trace] = None):
        self.trace = resolve_trace(trace)
        self.dough: Optional[str] = None
        self.sauce: Optional[str] = None
        self.toppings: List[str] = []

    def set_dough(self, dough: str) -> "PizzaBuilder":
        self.dough = dough
        self.trace.record(f"Builder: Dough set to {dough}")
        return self

    def set_sauce(self, sauce: str) -> "PizzaBuilder":
        self.sauce = sauce
        self.trace.record(f"Builder: Sauce set to {sauce}")
        return self

    def add_topping(self, topping: str) -> "PizzaBuilder":
        self.toppings.append(topping)
        self.trace.record(f"Builder: Added topping - {topping}")
        return self

    def build(self) -> CustomPizza:
        if not self.dough:
            raise InvalidStateError("Dough must be set before building pizza")
        if not self.sauce:
            raise InvalidStateError("Sauce must be set before building pizza")
        if not self.toppings:
            self.trace.record("Warning: Building pizza with no toppings")

        self.trace.record("Builder: Pizza construction complete!")
        return CustomPizza(dough=self.dough, sauce=self.sauce, toppings=tuple(self.toppings))
