"""Tests for the pydantic boundary models."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from shipping_quote.domain.models import QuoteRequest, QuoteStatus, ShippingMethod, ShippingMethodChange, ShippingQuote


def make_request(**overrides):
    data = {
        "order_id": "PED100",
        "price_before_shipping": "250",
        "weight_kg": "3.0",
        "distance_km": "320",
        "method": "ECONOMY",
    }
    data.update(overrides)
    return QuoteRequest(**data)


class TestQuoteRequest:
    def test_defaults(self):
        req = make_request()
        assert req.method is ShippingMethod.ECONOMY
        assert req.price_before_shipping == Decimal("250")
        assert req.free_shipping_threshold == Decimal("300.00")
        assert req.quote_ttl_seconds == 3600.0

    @pytest.mark.parametrize("field", ["price_before_shipping", "weight_kg", "distance_km", "free_shipping_threshold"])
    def test_rejects_negative(self, field):
        with pytest.raises(ValidationError):
            make_request(**{field: "-1"})

    def test_rejects_empty_order_id(self):
        with pytest.raises(ValidationError):
            make_request(order_id="")

    def test_rejects_unknown_method(self):
        with pytest.raises(ValidationError):
            make_request(method="TELEPORT")

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValidationError):
            make_request(quote_ttl_seconds=0)

    def test_json_round_trip_keeps_decimals(self):
        req = make_request(weight_kg="2.2")
        again = QuoteRequest.model_validate_json(req.model_dump_json())
        assert again == req
        assert again.weight_kg == Decimal("2.2")


def test_method_change_default_threshold():
    change = ShippingMethodChange(method="PROMOTIONAL")
    assert change.free_shipping_threshold == Decimal("300.00")


def test_quote_status_serializes_as_string():
    quote = ShippingQuote(
        order_id="PED100",
        method_name="Economy",
        price_before_shipping=Decimal("250"),
        weight_kg=Decimal("3.0"),
        distance_km=Decimal("320"),
        shipping_cost=Decimal("36.10"),
        total=Decimal("286.10"),
        status=QuoteStatus.CONFIRMED,
    )
    assert quote.model_dump(mode="json")["status"] == "CONFIRMED"
    assert quote.model_dump(mode="json")["total"] == "286.10"
