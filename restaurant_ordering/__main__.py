"""
Launcher for ``python -m restaurant_ordering``

- default       : scripted walk-through of the six patterns, paced for reading
- --fast        : same walk-through without pauses
- --interactive : asks for one order and places it through the facade
"""

import logging
import sys
from typing import List, Optional

from restaurant_ordering.core.facade import RestaurantFacade
from restaurant_ordering.core.payment import PaymentProcessor
from restaurant_ordering.core.trace import NO_PACING, Pacer, SleepPacer
from restaurant_ordering.data.ordering_params import PAUSE_LONG_MS, PAUSE_MEDIUM_MS
from restaurant_ordering.domain.listeners import (
    CustomerListener,
    KitchenListener,
    WaiterListener,
)
from restaurant_ordering.domain.order import Order, OrderStatus
from restaurant_ordering.domain.payment import CreditCardPayment
from restaurant_ordering.rules.enhancer import Enhancement, enhance
from restaurant_ordering.rules.meal_factory import available_meals, create_meal
from restaurant_ordering.rules.pizza_builder import PizzaBuilder
from restaurant_ordering.ui.order_view import (
    print_banner,
    print_meal,
    print_pattern_overview,
    print_receipt,
)
from restaurant_ordering.utils import get_input

DRINK_PRICE = 2.50


def run_demo(pacer: Pacer) -> None:
    print_banner("RESTAURANT ORDERING SYSTEM")
    print_pattern_overview()

    print_banner("SCENARIO 1: Simple order using the factory", "-")
    basic_burger = create_meal("Burger")
    print_meal(basic_burger)
    pacer.pause(PAUSE_MEDIUM_MS)

    print_banner("SCENARIO 2: Enhanced order using decorators", "-")
    deluxe_burger = enhance(basic_burger, Enhancement.CHEESE, Enhancement.BACON)
    print_meal(deluxe_burger, label="Enhanced")
    pacer.pause(PAUSE_MEDIUM_MS)

    print_banner("SCENARIO 3: Custom pizza using the builder", "-")
    custom_pizza = (
        PizzaBuilder()
        .set_dough("Thin Crust")
        .set_sauce("BBQ Sauce")
        .add_topping("Chicken")
        .add_topping("Mushrooms")
        .add_topping("Onions")
        .build()
    )
    print_meal(custom_pizza, label="Built")
    pacer.pause(PAUSE_MEDIUM_MS)

    print_banner("SCENARIO 4: Order tracking using observers", "-")
    order = Order(1001, "Alice Johnson")
    order.add_item(deluxe_burger.description)
    order.add_item("Coca Cola")
    order.attach(KitchenListener("Main Kitchen"))
    order.attach(CustomerListener("Alice Johnson", "+1-555-0123"))
    order.attach(WaiterListener("Bob", 5))
    for status in (OrderStatus.CONFIRMED, OrderStatus.PREPARING, OrderStatus.READY):
        pacer.pause(PAUSE_LONG_MS)
        order.set_status(status)

    print_banner("SCENARIO 5: Payment using strategies", "-")
    processor = PaymentProcessor()
    processor.select_method(
        CreditCardPayment("4532123456789012", "Alice Johnson", "123", "12/25", pacer=pacer)
    )
    if processor.execute_payment(round(deluxe_burger.price + DRINK_PRICE, 2)):
        order.set_status(OrderStatus.PAID)
    pacer.pause(PAUSE_MEDIUM_MS)

    print_banner("SCENARIO 6: Complete order using the facade", "-")
    facade = RestaurantFacade(pacer=pacer)
    receipt = facade.place_complete_order(
        "Charlie Brown", "Pizza", True, "Thin Crust", "Pepperoni", "PayPal"
    )
    if receipt is not None:
        print_receipt(receipt)

    print_banner("ALL 6 DESIGN PATTERNS SUCCESSFULLY DEMONSTRATED!")


def run_interactive() -> None:
    meals = available_meals()
    print("Meals : " + "  ".join(f"{i}) {m}" for i, m in enumerate(meals, start=1)))
    choice = get_input(
        input_message="Your meal : ",
        error_message=f"⚠️ Choose a number between 1 and {len(meals)}.",
        fn_validation=lambda x: 1 <= x <= len(meals),
    )
    name = get_input(
        input_message="Your name : ",
        error_message="⚠️ Name cannot be empty.",
        fn_validation=bool,
        cast=str,
    )
    extras = get_input(
        input_message="Extra cheese? (y/n) : ",
        error_message="⚠️ Answer y or n.",
        fn_validation=lambda x: x in ("y", "n"),
        cast=lambda s: s.lower(),
    )
    dough = get_input(
        input_message="Pizza dough : ",
        error_message="⚠️ Dough cannot be empty.",
        fn_validation=bool,
        cast=str,
    )
    topping = get_input(
        input_message="Pizza topping : ",
        error_message="⚠️ Topping cannot be empty.",
        fn_validation=bool,
        cast=str,
    )
    payment = get_input(
        input_message="Payment 1) Credit Card  2) PayPal : ",
        error_message="⚠️ Choose 1 or 2.",
        fn_validation=lambda x: x in (1, 2),
    )

    receipt = RestaurantFacade().place_complete_order(
        name,
        meals[choice - 1],
        extras == "y",
        dough,
        topping,
        "PayPal" if payment == 2 else "Credit Card",
    )
    if receipt is not None:
        print_receipt(receipt)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if "--interactive" in args:
        run_interactive()
    else:
        run_demo(NO_PACING if "--fast" in args else SleepPacer())
    return 0


if __name__ == "__main__":
    sys.exit(main())
