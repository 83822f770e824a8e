from enum import Enum
from typing import Dict, Optional, Type

from restaurant_ordering.core.trace import Trace
from restaurant_ordering.domain.enhancement import (
    EnhancedMeal,
    WithBacon,
    WithCheese,
    WithSauce,
)
from restaurant_ordering.domain.meal import Meal
from restaurant_ordering.errors import InvalidArgumentError


class Enhancement(str, Enum):
    CHEESE = "CHEESE"
    BACON = "BACON"
    SAUCE = "SAUCE"


LAYERS: Dict[Enhancement, Type[EnhancedMeal]] = {
    Enhancement.CHEESE: WithCheese,
    Enhancement.BACON: WithBacon,
    Enhancement.SAUCE: WithSauce,
}


def enhance(meal: Meal, *enhancements: Enhancement, trace: Optional[Trace] = None) -> Meal:
    """Wrap ``meal`` in each enhancement, innermost first.

    The last enhancement given ends up outermost, so its suffix comes last
    in the description.  With no enhancement the meal is returned as is.

    Example
    -------
    >>> from restaurant_ordering.core.trace import MemoryTrace
    >>> from restaurant_ordering.rules.meal_factory import create_meal
    >>> t = MemoryTrace()
    >>> meal = enhance(create_meal("burger", trace=t), Enhancement.CHEESE, Enhancement.BACON, trace=t)
    >>> meal.description
    'Classic Cheeseburger, with Extra Cheese, with Bacon'
    >>> meal.price, meal.cooking_time
    (12.99, 13)
    """
    for enhancement in enhancements:
        try:
            kind = Enhancement(enhancement)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown enhancement: {enhancement}. "
                f"Available enhancements: {', '.join(e.value for e in Enhancement)}"
            )
        meal = LAYERS[kind].wrap(meal, trace=trace)
    return meal
