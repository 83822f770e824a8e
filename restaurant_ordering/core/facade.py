"""
Restaurant facade: one call to place a complete order.

``place_complete_order`` runs the whole workflow in a fixed sequence
(factory, decorator, builder, observer, strategy).  It never raises: an
error anywhere stops the sequence, is logged and reported, and whatever
already happened (meal created, listeners notified) stays as it is.
"""

import logging
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from restaurant_ordering.core.payment import PaymentProcessor
from restaurant_ordering.core.trace import Pacer, Trace, resolve_pacer, resolve_trace
from restaurant_ordering.data import ordering_params as params
from restaurant_ordering.domain.listeners import CustomerListener, KitchenListener
from restaurant_ordering.domain.order import Order, OrderStatus
from restaurant_ordering.domain.payment import (
    CreditCardPayment,
    PaymentMethod,
    PayPalPayment,
)
from restaurant_ordering.errors import InvalidArgumentError
from restaurant_ordering.rules.enhancer import Enhancement, enhance
from restaurant_ordering.rules.meal_factory import create_meal
from restaurant_ordering.rules.pizza_builder import PizzaBuilder

logger = logging.getLogger(__name__)


class FacadeSettings(BaseModel):
    """Fixed values used by ``place_complete_order``."""

    order_id: int = params.FACADE_ORDER_ID
    kitchen_name: str = params.FACADE_KITCHEN_NAME
    customer_phone: str = params.FACADE_CUSTOMER_PHONE
    pizza_sauce: str = params.FACADE_PIZZA_SAUCE
    paypal_email: str = params.FACADE_PAYPAL_EMAIL
    paypal_password: str = params.FACADE_PAYPAL_PASSWORD
    card_number: str = params.FACADE_CARD_NUMBER
    card_cvv: str = params.FACADE_CARD_CVV
    card_expiry: str = params.FACADE_CARD_EXPIRY


class OrderReceipt(BaseModel):
    """Snapshot of an order placed through the facade."""

    model_config = ConfigDict(frozen=True)

    order_id: int
    customer_name: str
    items: Tuple[str, ...]
    total: float
    payment_method: str
    payment_succeeded: bool
    transaction_id: Optional[str] = None
    status: str


class RestaurantFacade:
    def __init__(
        self,
        trace: Optional[Trace] = None,
        pacer: Optional[Pacer] = None,
        settings: Optional[FacadeSettings] = None,
    ):
        self.trace = resolve_trace(trace)
        self.pacer = resolve_pacer(pacer)
        self.settings = settings or FacadeSettings()
        # orders placed so far, by id (a reused id replaces the older order)
        self.orders: Dict[int, Order] = {}

    def _payment_method(self, payment_method: str, customer_name: str) -> PaymentMethod:
        s = self.settings
        if payment_method == "PayPal":
            return PayPalPayment(
                s.paypal_email, s.paypal_password, trace=self.trace, pacer=self.pacer
            )
        return CreditCardPayment(
            s.card_number,
            customer_name,
            s.card_cvv,
            s.card_expiry,
            trace=self.trace,
            pacer=self.pacer,
        )

    def place_complete_order(
        self,
        customer_name: str,
        meal_type: str,
        add_extras: bool,
        dough: str,
        topping: str,
        payment_method: str,
    ) -> Optional[OrderReceipt]:
        """Place a full order: a catalog meal plus a one-topping custom pizza.

        Args:
            customer_name: Who the order is for.
            meal_type: Catalog token passed to the meal factory.
            add_extras: Wrap the meal once with extra cheese.
            dough: Dough of the custom pizza (sauce is always the configured one).
            topping: The custom pizza's single topping.
            payment_method: "PayPal", anything else pays by credit card.

        Returns:
            The receipt, or None if a step failed.
        """
        trace, pacer = self.trace, self.pacer
        trace.record(f"Processing complete order for: {customer_name}")
        trace.record("-" * 60)

        try:
            trace.record(f"→ Using Factory Pattern to create {meal_type}")
            meal = create_meal(meal_type, trace=trace)
            trace.record(f"  ✓ Base meal created: {meal.description}")
            pacer.pause(params.PAUSE_SHORT_MS)

            if add_extras:
                trace.record("→ Using Decorator Pattern to add extras")
                meal = enhance(meal, Enhancement.CHEESE, trace=trace)
                trace.record(f"  ✓ Enhanced: {meal.description}")
                pacer.pause(params.PAUSE_SHORT_MS)

            trace.record("→ Using Builder Pattern for custom pizza")
            custom_pizza = (
                PizzaBuilder(trace=trace)
                .set_dough(dough)
                .set_sauce(self.settings.pizza_sauce)
                .add_topping(topping)
                .build()
            )
            trace.record("  ✓ Custom pizza ready")
            pacer.pause(params.PAUSE_SHORT_MS)

            trace.record("→ Using Observer Pattern to set up notifications")
            order = Order(self.settings.order_id, customer_name, trace=trace)
            self.orders[order.order_id] = order
            order.add_item(meal.description)
            order.add_item(custom_pizza.description)
            order.attach(KitchenListener(self.settings.kitchen_name, trace=trace))
            order.attach(
                CustomerListener(customer_name, self.settings.customer_phone, trace=trace)
            )
            trace.record("  ✓ Observers attached")
            pacer.pause(params.PAUSE_SHORT_MS)

            order.set_status(OrderStatus.CONFIRMED)
            pacer.pause(params.PAUSE_MEDIUM_MS)

            trace.record("→ Using Strategy Pattern for payment")
            processor = PaymentProcessor(trace=trace)
            method = self._payment_method(payment_method, customer_name)
            processor.select_method(method)
            total = round(meal.price + custom_pizza.price, 2)
            paid = processor.execute_payment(total)
            pacer.pause(params.PAUSE_SHORT_MS)

            # status moves on even when the payment is refused
            order.set_status(OrderStatus.PAID)
            pacer.pause(params.PAUSE_SHORT_MS)
            order.set_status(OrderStatus.READY)

            trace.record("=" * 60)
            trace.record("✓ ORDER COMPLETE! All 6 patterns worked together.")
            trace.record("=" * 60)
        except Exception as e:
            logger.exception("Complete order for %s failed", customer_name)
            trace.record(f"Error: {e}")
            return None

        return OrderReceipt(
            order_id=order.order_id,
            customer_name=customer_name,
            items=tuple(order.items),
            total=total,
            payment_method=method.name,
            payment_succeeded=paid,
            transaction_id=method.last_transaction_id,
            status=order.status,
        )

    def view_order_status(self, order_id: int) -> List[str]:
        """Details of an order placed through this facade."""
        order = self.orders.get(order_id)
        if order is None:
            raise InvalidArgumentError(f"Unknown order #{order_id}")
        lines = order.describe()
        for line in lines:
            self.trace.record(line)
        return lines

    def cancel_order(self, order_id: int) -> bool:
        """Mark an order as cancelled and notify its listeners.

        Returns False when the facade never placed that order.
        """
        order = self.orders.get(order_id)
        if order is None:
            self.trace.record(f"Order #{order_id} not found, nothing to cancel")
            return False
        self.trace.record(f"CANCELLING ORDER #{order_id}")
        order.set_status(OrderStatus.CANCELLED)
        self.trace.record(f"  ✓ Order #{order_id} successfully cancelled")
        return True
