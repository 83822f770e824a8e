from typing import Optional

from restaurant_ordering.core.trace import Trace, resolve_trace
from restaurant_ordering.domain.payment import PaymentMethod
from restaurant_ordering.errors import InvalidArgumentError, InvalidStateError


class PaymentProcessor:
    """Runs payments through whichever method is currently selected.

    The method can be swapped at any time with ``select_method``; only the
    latest selection is kept.
    """

    def __init__(self, trace: Optional[Trace] = None):
        self.trace = resolve_trace(trace)
        self.method: Optional[PaymentMethod] = None

    @property
    def current_method_name(self) -> str:
        if self.method is None:
            return "No payment method set"
        return self.method.name

    def select_method(self, method: PaymentMethod) -> None:
        if method is None:
            raise InvalidArgumentError("Payment method cannot be None")
        self.method = method
        self.trace.record(f"Payment method set to: {method.name}")

    def execute_payment(self, amount: float) -> bool:
        """Pay ``amount`` with the selected method.

        Raises:
            InvalidStateError: If no method has been selected.
            InvalidArgumentError: If ``amount`` is not strictly positive.
        """
        if self.method is None:
            raise InvalidStateError(
                "Payment method not set. Please set a payment method first."
            )
        if not amount > 0:  # also rejects NaN
            raise InvalidArgumentError("Payment amount must be greater than zero")

        self.trace.record("-" * 60)
        self.trace.record(f"Executing payment using: {self.method.name}")
        self.trace.record("-" * 60)

        success = self.method.pay(amount)
        if success:
            self.trace.record("✓ Payment completed successfully!")
        else:
            self.trace.record("✗ Payment failed!")
        return success
