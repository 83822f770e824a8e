"""Ready-made meals created from the catalog.

The catalog (``data/meals.json``) is read and validated once, on first
use.  ``create_meal`` is otherwise stateless: the same token always gives
an equal meal.
"""

from functools import lru_cache
from typing import Dict, List, Optional, Type

from pydantic import RootModel

from restaurant_ordering.core.trace import Trace, resolve_trace
from restaurant_ordering.data import MEALS_CATALOG_PATH
from restaurant_ordering.domain.meal import (
    Burger,
    CatalogMeal,
    MealSpec,
    MealType,
    Pizza,
    Salad,
)
from restaurant_ordering.errors import InvalidArgumentError
from restaurant_ordering.utils import load_and_validate

_MEAL_CLASSES: Dict[MealType, Type[CatalogMeal]] = {
    MealType.PIZZA: Pizza,
    MealType.BURGER: Burger,
    MealType.SALAD: Salad,
}


class MealCatalog(RootModel[Dict[MealType, MealSpec]]):
    """Validated content of data/meals.json."""


@lru_cache(maxsize=None)
def load_catalog() -> MealCatalog:
    return load_and_validate(MEALS_CATALOG_PATH, MealCatalog)


def available_meals() -> List[str]:
    """Display names of the meals the factory can create.

    >>> available_meals()
    ['Pizza', 'Burger', 'Salad']
    """
    return [meal_type.label for meal_type in _MEAL_CLASSES]


def create_meal(meal_type: Optional[str], trace: Optional[Trace] = None) -> CatalogMeal:
    """Create the ready-made meal named by ``meal_type``.

    Parameters
    ----------
    meal_type : str
        "pizza", "burger" or "salad", case-insensitive.
    trace : Trace, optional
        Where the creation line is recorded (console by default).

    Returns
    -------
    CatalogMeal
        A ``Pizza``, ``Burger`` or ``Salad`` with catalog price and time.

    Raises
    ------
    InvalidArgumentError
        If ``meal_type`` is empty or unknown.

    Example
    -------
    >>> from restaurant_ordering.core.trace import MemoryTrace
    >>> meal = create_meal("PIZZA", trace=MemoryTrace())
    >>> meal.description, meal.price, meal.cooking_time
    ('Margherita Pizza', 12.99, 15)
    """
    if meal_type is None or not meal_type.strip():
        raise InvalidArgumentError("Meal type cannot be None or empty")

    try:
        kind = MealType(meal_type.strip().upper())
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown meal type: {meal_type}. "
            f"Available types: {', '.join(available_meals())}"
        )

    spec = load_catalog().root[kind]
    resolve_trace(trace).record(f"Factory: Creating {kind.label}...")
    return _MEAL_CLASSES[kind](**spec.model_dump())
