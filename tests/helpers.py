"""Test doubles shared by several test modules."""

from typing import List, Tuple

from restaurant_ordering.core.trace import Pacer
from restaurant_ordering.domain.listeners import OrderListener


class SpyListener(OrderListener):
    """Listener that only remembers the notifications it received."""

    def __init__(self, label: str, calls: List[Tuple[str, str, int]]):
        self.label = label
        self.calls = calls

    @property
    def name(self) -> str:
        return f"Spy ({self.label})"

    def update(self, status: str, order_id: int) -> None:
        self.calls.append((self.label, status, order_id))


class CountingPacer(Pacer):
    def __init__(self):
        self.pauses: List[int] = []

    def pause(self, milliseconds: int) -> None:
        self.pauses.append(milliseconds)
