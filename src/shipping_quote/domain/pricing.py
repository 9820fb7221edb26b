"""
Shipping pricing strategies (Strategy pattern).

The Strategy pattern allows swapping the shipping formula without changing
the order. An `Order` holds a reference to a `ShippingStrategy` (a Protocol)
and calls `calculate()`. To add a new shipping scheme, implement the protocol
and hand an instance to `Order.set_strategy()`.

All money is `Decimal`. The linear combination is computed exactly and only
the final result is rounded to cents, half away from zero (ROUND_HALF_UP),
so 0.125 becomes 0.13 (round-half-even would give 0.12).

Inputs are not bounds-checked: negative values flow through the formula.
Validation belongs to the outer boundary (see domain/models.py).

IMPORTANT: `ShippingQuoteWorkflow` evaluates strategies inside the workflow
sandbox, so they MUST stay deterministic — no I/O, no randomness, no clock.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from shipping_quote.domain.errors import InvalidArgument

Number = Decimal | int | float | str

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal via its string form (2.2 -> Decimal('2.2'))."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(amount: Decimal) -> Decimal:
    """Quantize to cents, rounding half away from zero."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class ShippingStrategy(Protocol):
    """Interface for computing the shipping cost of an order.

    Any class with a `name` attribute and a matching `calculate()` method
    satisfies this protocol (structural subtyping — no inheritance needed).
    """

    @property
    def name(self) -> str: ...

    def calculate(self, weight_kg: Decimal, distance_km: Decimal, price_before_shipping: Decimal) -> Decimal: ...


class _LinearRate:
    """Base rate + per-kg + per-km + a percentage of the goods price."""

    name: str = ""
    BASE_RATE: Decimal = ZERO
    PER_KG: Decimal = ZERO
    PER_KM: Decimal = ZERO
    PRICE_RATE: Decimal = ZERO

    def calculate(self, weight_kg: Number, distance_km: Number, price_before_shipping: Number) -> Decimal:
        cost = (
            self.BASE_RATE
            + self.PER_KG * to_decimal(weight_kg)
            + self.PER_KM * to_decimal(distance_km)
            + self.PRICE_RATE * to_decimal(price_before_shipping)
        )
        return round_money(cost)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FastShipping(_LinearRate):
    """Fastest and most expensive.

    Examples:
        - 2.2 kg, 150 km, 120.50: 12.00 + 9.90 + 15.00 + 3.615 = 40.515 -> 40.52
    """

    name = "Fast"
    BASE_RATE = Decimal("12.00")
    PER_KG = Decimal("4.50")
    PER_KM = Decimal("0.10")
    PRICE_RATE = Decimal("0.03")  # 3% of the goods price


class EconomyShipping(_LinearRate):
    """Slower and cheaper.

    Examples:
        - 0.5 kg, 12 km, 35.00: 6.00 + 1.40 + 0.72 + 0.35 = 8.47
    """

    name = "Economy"
    BASE_RATE = Decimal("6.00")
    PER_KG = Decimal("2.80")
    PER_KM = Decimal("0.06")
    PRICE_RATE = Decimal("0.01")  # 1% of the goods price


class PickupShipping:
    """Customer collects the order: always free."""

    name = "Pickup (free)"

    def calculate(self, weight_kg: Number, distance_km: Number, price_before_shipping: Number) -> Decimal:
        return ZERO

    def __repr__(self) -> str:
        return "PickupShipping()"


class PromotionalFreeShipping:
    """Free shipping at or above `threshold`, Economy pricing below it.

    The fallback is always the Economy formula; it is not configurable.
    """

    name = "Promotion: free shipping over threshold"

    def __init__(self, threshold: Number) -> None:
        if threshold is None:
            raise InvalidArgument("threshold")
        self._threshold = to_decimal(threshold)
        self._fallback = EconomyShipping()

    @property
    def threshold(self) -> Decimal:
        return self._threshold

    def calculate(self, weight_kg: Number, distance_km: Number, price_before_shipping: Number) -> Decimal:
        if to_decimal(price_before_shipping) >= self._threshold:
            return ZERO
        return self._fallback.calculate(weight_kg, distance_km, price_before_shipping)

    def __repr__(self) -> str:
        return f"PromotionalFreeShipping(threshold={self._threshold})"
