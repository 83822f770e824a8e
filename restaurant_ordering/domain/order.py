from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union

from restaurant_ordering.core.trace import CONSOLE, Trace
from restaurant_ordering.domain.listeners import OrderListener
from restaurant_ordering.errors import InvalidArgumentError


class OrderStatus(str, Enum):
    """Well-known steps of an order's life.

    An order accepts any status text; these are only the values the
    listeners know how to describe (plus Paid and Cancelled, which they
    report through their generic branch).
    """

    CREATED = "Created"
    CONFIRMED = "Confirmed"
    PREPARING = "Preparing"
    READY = "Ready"
    PAID = "Paid"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


def status_text(status: Union[OrderStatus, str]) -> str:
    return status.value if isinstance(status, OrderStatus) else str(status)


@dataclass
class Order:
    """An order being tracked, and the subject its listeners observe.

    ``set_status`` accepts any text, without transition checks, and
    notifies every attached listener in attachment order before
    returning.  A listener that raises stops the remaining notifications.

    Example
    -------
    >>> from restaurant_ordering.core.trace import MemoryTrace
    >>> order = Order(1001, "Alice Johnson", trace=MemoryTrace())
    >>> order.set_status("Confirmed")
    >>> order.status
    'Confirmed'
    """

    order_id: int
    customer_name: str
    trace: Trace = field(default=CONSOLE, repr=False, compare=False)
    status: str = field(default=OrderStatus.CREATED.value, init=False)
    _items: List[str] = field(default_factory=list, init=False, repr=False)
    _listeners: List[OrderListener] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self.trace.record(f"Order #{self.order_id} created for {self.customer_name}")

    @property
    def items(self) -> List[str]:
        return list(self._items)

    @property
    def listeners(self) -> Tuple[OrderListener, ...]:
        return tuple(self._listeners)

    def add_item(self, item: str) -> None:
        self._items.append(item)
        self.trace.record(f"Item added to order: {item}")

    def attach(self, listener: OrderListener) -> None:
        if listener is None:
            raise InvalidArgumentError("Listener cannot be None")
        # identity check: listeners with the same fields are still distinct
        if any(known is listener for known in self._listeners):
            return
        self._listeners.append(listener)
        self.trace.record(f"Observer attached: {listener.name}")

    def detach(self, listener: OrderListener) -> None:
        for index, known in enumerate(self._listeners):
            if known is listener:
                del self._listeners[index]
                self.trace.record(f"Observer detached: {listener.name}")
                return

    def set_status(self, new_status: Union[OrderStatus, str]) -> None:
        previous = self.status
        self.status = status_text(new_status)
        self.trace.record("=" * 60)
        self.trace.record(
            f"Order #{self.order_id} status changing: {previous} → {self.status}"
        )
        self.trace.record("=" * 60)
        self._notify_listeners()

    def _notify_listeners(self) -> None:
        self.trace.record("~" * 60)
        self.trace.record(
            f"NOTIFYING ALL OBSERVERS - Order #{self.order_id} status: {self.status}"
        )
        self.trace.record("~" * 60)
        for listener in list(self._listeners):
            listener.update(self.status, self.order_id)
        self.trace.record("~" * 60)

    def describe(self) -> List[str]:
        """Order details, one line per fact."""
        return [
            f"Order #{self.order_id} Details:",
            f"Customer: {self.customer_name}",
            f"Items: {', '.join(self._items)}",
            f"Status: {self.status}",
        ]
