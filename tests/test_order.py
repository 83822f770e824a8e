import pytest

from restaurant_ordering.domain.listeners import (
    CustomerListener,
    KitchenListener,
    WaiterListener,
)
from restaurant_ordering.domain.order import Order, OrderStatus
from restaurant_ordering.errors import InvalidArgumentError
from tests.helpers import SpyListener


@pytest.fixture
def order(trace):
    return Order(1001, "Alice Johnson", trace=trace)


def headers(trace):
    return [line for line in trace.lines if line.startswith("[")]


class TestOrder:
    def test_initial_state(self, order, trace):
        assert order.status == "Created"
        assert order.items == []
        assert order.listeners == ()
        assert trace.lines == ["Order #1001 created for Alice Johnson"]

    def test_add_item_keeps_order_and_duplicates(self, order):
        order.add_item("Burger")
        order.add_item("Coca Cola")
        order.add_item("Burger")
        assert order.items == ["Burger", "Coca Cola", "Burger"]

    def test_items_is_a_copy(self, order):
        order.items.append("Sneaky")
        assert order.items == []

    def test_attach_none(self, order):
        with pytest.raises(InvalidArgumentError):
            order.attach(None)

    def test_attach_twice_is_a_noop(self, order, calls, trace):
        spy = SpyListener("kitchen", calls)
        order.attach(spy)
        order.attach(spy)
        assert len(order.listeners) == 1
        assert trace.lines.count("Observer attached: Spy (kitchen)") == 1

    def test_equal_looking_listeners_are_distinct(self, order, trace):
        order.attach(KitchenListener("Main Kitchen", trace=trace))
        order.attach(KitchenListener("Main Kitchen", trace=trace))
        assert len(order.listeners) == 2

    def test_detach_unknown_is_silent(self, order, calls, trace):
        order.attach(SpyListener("kitchen", calls))
        before = list(trace.lines)
        order.detach(SpyListener("stranger", calls))
        assert len(order.listeners) == 1
        assert trace.lines == before

    def test_any_status_text_is_accepted(self, order, calls):
        order.attach(SpyListener("kitchen", calls))
        order.set_status("Waiting for the moon")
        assert order.status == "Waiting for the moon"
        assert calls == [("kitchen", "Waiting for the moon", 1001)]

    def test_enum_status_is_stored_as_text(self, order):
        order.set_status(OrderStatus.PREPARING)
        assert order.status == "Preparing"
        assert type(order.status) is str

    def test_transition_is_traced(self, order, trace):
        order.set_status("Confirmed")
        assert "Order #1001 status changing: Created → Confirmed" in trace.lines

    def test_describe(self, order):
        order.add_item("Burger")
        order.add_item("Coca Cola")
        assert order.describe() == [
            "Order #1001 Details:",
            "Customer: Alice Johnson",
            "Items: Burger, Coca Cola",
            "Status: Created",
        ]


class TestNotifications:
    def test_fan_out_in_attach_order(self, order, calls):
        kitchen, customer, waiter = (SpyListener(n, calls) for n in ("kitchen", "customer", "waiter"))
        for listener in (kitchen, customer, waiter):
            order.attach(listener)

        order.set_status("Confirmed")
        assert calls == [
            ("kitchen", "Confirmed", 1001),
            ("customer", "Confirmed", 1001),
            ("waiter", "Confirmed", 1001),
        ]

        calls.clear()
        order.detach(waiter)
        order.set_status("Preparing")
        assert calls == [
            ("kitchen", "Preparing", 1001),
            ("customer", "Preparing", 1001),
        ]

    def test_same_status_twice_notifies_twice(self, order, calls):
        order.attach(SpyListener("kitchen", calls))
        order.attach(SpyListener("customer", calls))
        order.set_status("Ready")
        order.set_status("Ready")
        assert len(calls) == 4
        assert [c[0] for c in calls] == ["kitchen", "customer", "kitchen", "customer"]

    def test_failing_listener_stops_the_round(self, order, calls):
        class Broken(SpyListener):
            def update(self, status, order_id):
                raise RuntimeError("listener down")

        order.attach(SpyListener("first", calls))
        order.attach(Broken("broken", calls))
        order.attach(SpyListener("last", calls))
        with pytest.raises(RuntimeError, match="listener down"):
            order.set_status("Confirmed")
        assert calls == [("first", "Confirmed", 1001)]
        assert order.status == "Confirmed"

    def test_real_listeners_in_attach_order(self, order, trace):
        order.attach(KitchenListener("Main Kitchen", trace=trace))
        order.attach(CustomerListener("Alice Johnson", "+1-555-0123", trace=trace))
        order.attach(WaiterListener("Bob", 5, trace=trace))
        trace.clear()
        order.set_status("Confirmed")
        assert headers(trace) == [
            "[KITCHEN - Main Kitchen] Received notification:",
            "[CUSTOMER - Alice Johnson] Notification received:",
            "[WAITER - Bob | Table 5] Alert:",
        ]


class TestListeners:
    def test_names(self, trace):
        assert KitchenListener("Main Kitchen", trace=trace).name == "Kitchen (Main Kitchen)"
        assert CustomerListener("Alice", "+1", trace=trace).name == "Customer (Alice)"
        assert WaiterListener("Bob", 5, trace=trace).name == "Waiter (Bob - Table 5)"

    def test_customer_gets_sms_when_ready(self, trace):
        CustomerListener("Alice", "+1-555-0123", trace=trace).update("Ready", 7)
        assert trace.lines == [
            "[CUSTOMER - Alice] Notification received:",
            "  → Great news! Your order #7 is ready!",
            "  → Please come to pickup counter",
            "  → SMS sent to: +1-555-0123",
        ]

    def test_waiter_mentions_table(self, trace):
        WaiterListener("Bob", 5, trace=trace).update("Delivered", 7)
        assert "  → Order #7 delivered to Table 5" in trace.lines

    def test_unknown_status_uses_fallback(self, trace):
        KitchenListener("Main", trace=trace).update("Paid", 7)
        CustomerListener("Alice", "+1", trace=trace).update("Paid", 7)
        WaiterListener("Bob", 2, trace=trace).update("Paid", 7)
        assert "  → Order #7 status: Paid" in trace.lines
        assert "  → Order #7 update: Paid" in trace.lines
        assert trace.lines.count("  → Order #7 status: Paid") == 2
