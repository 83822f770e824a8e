"""
Order listeners (observers).

A listener renders a role-specific notice every time an order it is
attached to changes status.  Listeners never change the order and are
compared by identity: two kitchens with the same name are still two
listeners.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, Dict, Tuple

from restaurant_ordering.core.trace import CONSOLE, Trace


class OrderListener(ABC):
    """Something that wants to hear about order status changes."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def update(self, status: str, order_id: int) -> None: ...


@dataclass(eq=False)
class _RoleListener(OrderListener):
    """Listener that renders a fixed set of lines per well-known status.

    ``MESSAGES`` maps a status to format strings; any other status falls
    back to ``FALLBACK``.  Placeholders are filled from ``_context``.
    """

    MESSAGES: ClassVar[Dict[str, Tuple[str, ...]]] = {}
    FALLBACK: ClassVar[str] = "  → Order #{order_id} status: {status}"

    trace: Trace = field(default=CONSOLE, repr=False, kw_only=True)

    @abstractmethod
    def _header(self) -> str: ...

    def _context(self) -> Dict[str, object]:
        return {}

    def update(self, status: str, order_id: int) -> None:
        self.trace.record(self._header())
        lines = self.MESSAGES.get(status, (self.FALLBACK,))
        values = {**self._context(), "order_id": order_id, "status": status}
        for line in lines:
            self.trace.record(line.format(**values))


@dataclass(eq=False)
class KitchenListener(_RoleListener):
    kitchen_name: str

    MESSAGES: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "Confirmed": (
            "  → Order #{order_id} confirmed. Adding to cooking queue...",
            "  → Preparing ingredients for order #{order_id}",
        ),
        "Preparing": (
            "  → Order #{order_id} is now being prepared",
            "  → Chefs are cooking the meals...",
        ),
        "Ready": (
            "  → Order #{order_id} is ready for pickup!",
            "  → Moving order to pickup counter...",
        ),
        "Delivered": (
            "  → Order #{order_id} has been delivered",
            "  → Kitchen can clear this order from queue",
        ),
    }

    @property
    def name(self) -> str:
        return f"Kitchen ({self.kitchen_name})"

    def _header(self) -> str:
        return f"[KITCHEN - {self.kitchen_name}] Received notification:"


@dataclass(eq=False)
class CustomerListener(_RoleListener):
    customer_name: str
    phone_number: str

    MESSAGES: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "Confirmed": (
            "  → Your order #{order_id} has been confirmed!",
            "  → We'll notify you when it's ready",
            "  → SMS sent to: {phone}",
        ),
        "Preparing": (
            "  → Your order #{order_id} is being prepared",
            "  → Estimated time: 15-20 minutes",
        ),
        "Ready": (
            "  → Great news! Your order #{order_id} is ready!",
            "  → Please come to pickup counter",
            "  → SMS sent to: {phone}",
        ),
        "Delivered": (
            "  → Order #{order_id} delivered. Enjoy your meal!",
            "  → Thank you for choosing our restaurant!",
            "  → Please rate your experience",
        ),
    }
    FALLBACK: ClassVar[str] = "  → Order #{order_id} update: {status}"

    @property
    def name(self) -> str:
        return f"Customer ({self.customer_name})"

    def _header(self) -> str:
        return f"[CUSTOMER - {self.customer_name}] Notification received:"

    def _context(self) -> Dict[str, object]:
        return {"phone": self.phone_number}


@dataclass(eq=False)
class WaiterListener(_RoleListener):
    waiter_name: str
    table_number: int

    MESSAGES: ClassVar[Dict[str, Tuple[str, ...]]] = {
        "Confirmed": (
            "  → Order #{order_id} confirmed for Table {table}",
            "  → Informing customer about wait time...",
        ),
        "Preparing": (
            "  → Order #{order_id} is being prepared in kitchen",
            "  → Will check on progress shortly...",
        ),
        "Ready": (
            "  → Order #{order_id} is ready at pickup counter!",
            "  → Picking up order to serve at Table {table}",
        ),
        "Delivered": (
            "  → Order #{order_id} delivered to Table {table}",
            "  → Checking if customer needs anything else...",
        ),
    }

    @property
    def name(self) -> str:
        return f"Waiter ({self.waiter_name} - Table {self.table_number})"

    def _header(self) -> str:
        return f"[WAITER - {self.waiter_name} | Table {self.table_number}] Alert:"

    def _context(self) -> Dict[str, object]:
        return {"table": self.table_number}
