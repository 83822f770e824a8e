from restaurant_ordering.console_style import failure, heading, pattern_name, success
from restaurant_ordering.core.facade import OrderReceipt
from restaurant_ordering.domain.meal import Meal

PATTERNS = (
    ("FACTORY", "creates base meals from a type name"),
    ("BUILDER", "assembles custom pizzas step by step"),
    ("DECORATOR", "adds extras to any meal"),
    ("STRATEGY", "swaps payment methods at runtime"),
    ("OBSERVER", "notifies kitchen, customer and waiter of status changes"),
    ("FACADE", "places a complete order in one call"),
)


def format_to_dollars(x: float) -> str:
    """Format a float as a dollar amount with cents."""
    return f"${x:,.2f}"


def print_banner(title: str, char: str = "=", width: int = 60) -> None:
    print("\n" + char * width)
    print(heading(title))
    print(char * width)


def print_pattern_overview() -> None:
    print_banner("DESIGN PATTERNS IN THIS WORKFLOW")
    for index, (pattern, role) in enumerate(PATTERNS, start=1):
        print(f"{index}. {pattern_name(pattern):20s} {role}")


def print_meal(meal: Meal, label: str = "Created") -> None:
    print(success(f"✓ {label}: {meal.description}"))
    print(f"  Price: {format_to_dollars(meal.price)}")
    print(f"  Cooking time: {meal.cooking_time} min")


def print_receipt(receipt: OrderReceipt) -> None:
    print_banner(f"RECEIPT - Order #{receipt.order_id}")
    print(f"Customer : {receipt.customer_name}")
    for item in receipt.items:
        print(f"  - {item}")
    print(f"Total    : {format_to_dollars(receipt.total)}")
    outcome = success("paid") if receipt.payment_succeeded else failure("refused")
    print(f"Payment  : {receipt.payment_method} ({outcome})")
    if receipt.transaction_id:
        print(f"Transaction : {receipt.transaction_id}")
    print(f"Status   : {receipt.status}")
