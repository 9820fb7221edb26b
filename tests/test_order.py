"""Tests for Order, the context that holds a replaceable shipping strategy."""
from decimal import Decimal

import pytest

from shipping_quote.domain.errors import InvalidArgument
from shipping_quote.domain.order import Order
from shipping_quote.domain.pricing import EconomyShipping, FastShipping, PickupShipping, PromotionalFreeShipping

D = Decimal


@pytest.fixture
def order():
    return Order("PED100", D("250"), D("3.0"), D("320"), EconomyShipping())


class TestConstruction:
    def test_attributes(self, order):
        assert order.id == "PED100"
        assert order.price_before_shipping == D("250")
        assert order.weight_kg == D("3.0")
        assert order.distance_km == D("320")
        assert isinstance(order.strategy, EconomyShipping)

    def test_numbers_become_decimal(self):
        order = Order("PED001", 120.50, 2.2, 150, EconomyShipping())
        assert order.price_before_shipping == D("120.5")
        assert order.weight_kg == D("2.2")
        assert isinstance(order.distance_km, Decimal)

    def test_missing_strategy(self):
        with pytest.raises(InvalidArgument) as exc_info:
            Order("PED001", D("1"), D("1"), D("1"), None)
        assert exc_info.value.argument == "initial_strategy"

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Order("PED001", D("1"), D("1"), D("1"), None)

    def test_attributes_are_read_only(self, order):
        with pytest.raises(AttributeError):
            order.weight_kg = D("10")


class TestQueries:
    def test_shipping_and_total(self, order):
        assert order.calculate_shipping() == D("36.10")
        assert order.total() == D("286.10")
        assert order.shipping_method_name == "Economy"

    def test_total_is_price_plus_shipping(self):
        order = Order("PED001", D("120.50"), D("2.2"), D("150"), FastShipping())
        assert order.calculate_shipping() == D("40.52")
        assert order.total() == D("161.02")

    def test_pickup_total_equals_price(self):
        order = Order("PED004", D("80.00"), D("1.0"), D("0"), PickupShipping())
        assert order.calculate_shipping() == D("0.00")
        assert order.total() == D("80.00")

    def test_total_is_rounded(self):
        order = Order("PED005", D("10.005"), D("0"), D("0"), PickupShipping())
        assert order.total() == D("10.01")

    def test_repeated_calls_agree(self, order):
        assert order.calculate_shipping() == order.calculate_shipping()
        assert order.total() == order.total()


class TestSetStrategy:
    def test_replacement_changes_results(self, order):
        order.set_strategy(FastShipping())
        assert order.shipping_method_name == "Fast"
        assert order.calculate_shipping() == D("65.00")
        assert order.total() == D("315.00")

        order.set_strategy(PromotionalFreeShipping(D("300")))
        assert order.shipping_method_name == "Promotion: free shipping over threshold"
        # 250 < 300, so Economy pricing still applies
        assert order.calculate_shipping() == D("36.10")

        order.set_strategy(PickupShipping())
        assert order.total() == D("250")

    def test_replacement_keeps_order_data(self, order):
        order.set_strategy(FastShipping())
        assert order.id == "PED100"
        assert order.price_before_shipping == D("250")
        assert order.weight_kg == D("3.0")
        assert order.distance_km == D("320")

    def test_missing_strategy_leaves_order_unchanged(self, order):
        strategy = order.strategy
        with pytest.raises(InvalidArgument) as exc_info:
            order.set_strategy(None)
        assert exc_info.value.argument == "strategy"
        assert order.strategy is strategy
        assert order.calculate_shipping() == D("36.10")

    def test_accepts_any_structural_strategy(self, order):
        class FlatRate:
            name = "Flat"

            def calculate(self, weight_kg, distance_km, price_before_shipping):
                return D("9.99")

        order.set_strategy(FlatRate())
        assert order.shipping_method_name == "Flat"
        assert order.total() == D("259.99")
