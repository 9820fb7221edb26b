"""
Order — the context of the shipping Strategy pattern.

An Order owns its goods price, weight and distance, and holds exactly one
`ShippingStrategy`. Shipping cost is never stored: every call to
`calculate_shipping()` asks the current strategy, so replacing the strategy
with `set_strategy()` takes effect immediately.

An Order is not thread-safe; it is owned by one thread (or one workflow
execution) at a time.
"""

import logging
from decimal import Decimal

from shipping_quote.domain.errors import InvalidArgument
from shipping_quote.domain.pricing import Number, ShippingStrategy, round_money, to_decimal

logger = logging.getLogger(__name__)


class Order:
    """An order whose shipping cost depends on its current strategy."""

    def __init__(
        self,
        id: str,
        price_before_shipping: Number,
        weight_kg: Number,
        distance_km: Number,
        initial_strategy: ShippingStrategy,
    ) -> None:
        if initial_strategy is None:
            raise InvalidArgument("initial_strategy")
        self._id = id
        self._price_before_shipping = to_decimal(price_before_shipping)
        self._weight_kg = to_decimal(weight_kg)
        self._distance_km = to_decimal(distance_km)
        self._strategy = initial_strategy

    @property
    def id(self) -> str:
        return self._id

    @property
    def price_before_shipping(self) -> Decimal:
        return self._price_before_shipping

    @property
    def weight_kg(self) -> Decimal:
        return self._weight_kg

    @property
    def distance_km(self) -> Decimal:
        return self._distance_km

    @property
    def strategy(self) -> ShippingStrategy:
        return self._strategy

    @property
    def shipping_method_name(self) -> str:
        return self._strategy.name

    def set_strategy(self, strategy: ShippingStrategy) -> None:
        """Replace the shipping strategy. The previous one is discarded."""
        if strategy is None:
            raise InvalidArgument("strategy")
        logger.debug("Order %s: shipping %r -> %r", self._id, self._strategy, strategy)
        self._strategy = strategy

    def calculate_shipping(self) -> Decimal:
        return self._strategy.calculate(self._weight_kg, self._distance_km, self._price_before_shipping)

    def total(self) -> Decimal:
        """Goods price plus shipping, rounded to cents."""
        return round_money(self._price_before_shipping + self.calculate_shipping())

    def __repr__(self) -> str:
        return f"Order(id={self._id!r}, strategy={self._strategy!r})"
