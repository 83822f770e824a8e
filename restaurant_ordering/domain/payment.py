"""
Payment methods (strategies).

Each method simulates its own transaction and reports it through the
trace.  Nothing is charged: credit card and PayPal always succeed, cash
fails only when the customer hands over too little.
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from restaurant_ordering.core.trace import CONSOLE, NO_PACING, Pacer, Trace
from restaurant_ordering.data.ordering_params import PAUSE_MEDIUM_MS


def _transaction_id(prefix: str) -> str:
    return f"{prefix}-{int(time.time() * 1000)}"


@dataclass(eq=False)
class PaymentMethod(ABC):
    trace: Trace = field(default=CONSOLE, repr=False, kw_only=True)
    pacer: Pacer = field(default=NO_PACING, repr=False, kw_only=True)
    last_transaction_id: Optional[str] = field(default=None, init=False)

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def pay(self, amount: float) -> bool:
        """Run the transaction; True when it went through."""


@dataclass(eq=False)
class CreditCardPayment(PaymentMethod):
    card_number: str
    card_holder: str
    cvv: str = field(repr=False)
    expiry_date: str

    @property
    def name(self) -> str:
        return "Credit Card"

    @property
    def masked_number(self) -> str:
        return f"**** **** **** {self.card_number[-4:]}"

    def pay(self, amount: float) -> bool:
        self.trace.record("Processing Credit Card Payment...")
        self.trace.record(f"Card Holder: {self.card_holder}")
        self.trace.record(f"Card Number: {self.masked_number}")
        self.trace.record(f"Amount: ${amount:.2f}")
        self.trace.record("Connecting to payment gateway...")
        self.pacer.pause(PAUSE_MEDIUM_MS)
        self.trace.record("Verifying card details...")
        self.pacer.pause(PAUSE_MEDIUM_MS)
        self.trace.record("Payment authorized!")
        self.last_transaction_id = _transaction_id("CC")
        self.trace.record(f"Transaction ID: {self.last_transaction_id}")
        return True


@dataclass(eq=False)
class CashPayment(PaymentMethod):
    cash_received: float

    @property
    def name(self) -> str:
        return "Cash"

    def pay(self, amount: float) -> bool:
        self.trace.record("Processing Cash Payment...")
        self.trace.record(f"Amount Due: ${amount:.2f}")
        self.trace.record(f"Cash Received: ${self.cash_received:.2f}")

        if self.cash_received < amount:
            shortfall = round(amount - self.cash_received, 2)
            self.trace.record(f"Insufficient cash! Need ${shortfall:.2f} more.")
            return False

        change = round(self.cash_received - amount, 2)
        self.trace.record("Payment accepted!")
        if change > 0:
            self.trace.record(f"Change to return: ${change:.2f}")
        else:
            self.trace.record("Exact amount received. No change needed.")
        self.last_transaction_id = _transaction_id("CASH")
        self.trace.record(f"Transaction ID: {self.last_transaction_id}")
        return True


@dataclass(eq=False)
class PayPalPayment(PaymentMethod):
    email: str
    password: str = field(repr=False)

    @property
    def name(self) -> str:
        return "PayPal"

    def pay(self, amount: float) -> bool:
        self.trace.record("Processing PayPal Payment...")
        self.trace.record(f"PayPal Account: {self.email}")
        self.trace.record(f"Amount: ${amount:.2f}")
        for step in (
            "Logging into PayPal...",
            "Verifying account credentials...",
            "Processing payment through PayPal...",
        ):
            self.trace.record(step)
            self.pacer.pause(PAUSE_MEDIUM_MS)
        self.trace.record("Payment successful!")
        self.last_transaction_id = _transaction_id("PP")
        self.trace.record(f"Transaction ID: {self.last_transaction_id}")
        self.trace.record(f"Receipt sent to: {self.email}")
        return True
