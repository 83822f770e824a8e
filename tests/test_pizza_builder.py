import pytest
from pydantic import ValidationError

from restaurant_ordering.domain.pizza import CustomPizza
from restaurant_ordering.errors import InvalidStateError
from restaurant_ordering.rules.pizza_builder import PizzaBuilder


@pytest.fixture
def builder(trace):
    return PizzaBuilder(trace=trace)


class TestPizzaBuilder:
    def test_three_toppings(self, builder):
        pizza = (
            builder.set_dough("Thin Crust")
            .set_sauce("BBQ Sauce")
            .add_topping("Chicken")
            .add_topping("Mushrooms")
            .add_topping("Onions")
            .build()
        )
        assert pizza.price == pytest.approx(15.49)
        assert pizza.cooking_time == 18
        assert pizza.toppings == ("Chicken", "Mushrooms", "Onions")
        assert pizza.description == "Custom Pizza with Thin Crust, BBQ Sauce and 3 toppings"

    def test_setters_return_the_same_builder(self, builder):
        assert builder.set_dough("Thick") is builder
        assert builder.set_sauce("Pesto") is builder
        assert builder.add_topping("Basil") is builder

    def test_missing_dough(self, builder):
        builder.set_sauce("BBQ Sauce")
        with pytest.raises(InvalidStateError, match="Dough"):
            builder.build()

    def test_missing_sauce(self, builder):
        builder.set_dough("Thin Crust")
        with pytest.raises(InvalidStateError, match="Sauce"):
            builder.build()

    def test_empty_dough_counts_as_missing(self, builder):
        builder.set_dough("").set_sauce("BBQ Sauce")
        with pytest.raises(InvalidStateError):
            builder.build()

    def test_no_toppings_only_warns(self, builder, trace):
        pizza = builder.set_dough("Thin Crust").set_sauce("Tomato Sauce").build()
        assert pizza.price == pytest.approx(10.99)
        assert pizza.cooking_time == 15
        assert "Warning: Building pizza with no toppings" in trace.lines

    def test_second_build_reflects_latest_state(self, builder):
        builder.set_dough("Thin Crust").set_sauce("Tomato Sauce").add_topping("Ham")
        first = builder.build()
        builder.add_topping("Olives")
        second = builder.build()
        assert first.toppings == ("Ham",)
        assert second.toppings == ("Ham", "Olives")
        assert first is not second

    def test_steps_are_traced_in_order(self, builder, trace):
        builder.set_dough("Thin Crust").set_sauce("BBQ Sauce").add_topping("Chicken").build()
        assert trace.lines == [
            "Builder: Dough set to Thin Crust",
            "Builder: Sauce set to BBQ Sauce",
            "Builder: Added topping - Chicken",
            "Builder: Pizza construction complete!",
        ]


class TestCustomPizza:
    def test_is_frozen(self, builder):
        pizza = builder.set_dough("Thin Crust").set_sauce("BBQ Sauce").build()
        with pytest.raises(ValidationError):
            pizza.dough = "Thick Crust"

    def test_rejects_empty_sauce(self):
        with pytest.raises(ValidationError):
            CustomPizza(dough="Thin Crust", sauce="")

    def test_prepare_lists_components(self):
        pizza = CustomPizza(dough="Thin Crust", sauce="BBQ Sauce", toppings=("Chicken", "Onions"))
        assert pizza.prepare() == [
            "Preparing Custom Pizza:",
            "- Dough: Thin Crust",
            "- Sauce: BBQ Sauce",
            "- Toppings: Chicken, Onions",
        ]
