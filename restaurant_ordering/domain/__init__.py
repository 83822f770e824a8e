"""
Domain objects for the ordering workflow.

Meals (catalog meals, custom pizzas and enhancement layers) are frozen
pydantic models.  Orders, listeners and payment methods are plain
dataclasses compared by identity, since each instance stands for one
real participant.
"""

from .meal import Burger, Meal, MealType, Pizza, Salad
from .pizza import CustomPizza
from .enhancement import EnhancedMeal, WithBacon, WithCheese, WithSauce
from .listeners import CustomerListener, KitchenListener, OrderListener, WaiterListener
from .order import Order, OrderStatus
from .payment import CashPayment, CreditCardPayment, PaymentMethod, PayPalPayment

__all__ = [
    "Burger",
    "CashPayment",
    "CreditCardPayment",
    "CustomPizza",
    "CustomerListener",
    "EnhancedMeal",
    "KitchenListener",
    "Meal",
    "MealType",
    "Order",
    "OrderListener",
    "OrderStatus",
    "PaymentMethod",
    "PayPalPayment",
    "Pizza",
    "Salad",
    "WaiterListener",
    "WithBacon",
    "WithCheese",
    "WithSauce",
]
