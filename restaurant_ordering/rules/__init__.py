"""
Construction rules.

Factory for catalog meals, builder for custom pizzas and a helper that
stacks enhancement layers on any meal.
"""

from .meal_factory import available_meals, create_meal
from .pizza_builder import PizzaBuilder
from .enhancer import Enhancement, enhance

__all__ = ["Enhancement", "PizzaBuilder", "available_meals", "create_meal", "enhance"]
