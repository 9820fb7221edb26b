"""
Simple factory for shipping strategies.

The **Factory pattern** centralises strategy construction. The workflow and
the client-facing models speak in `ShippingMethod` values; they call
`StrategyFactory.get_strategy()` instead of instantiating strategies
themselves.

Strategies are stateless, so the fixed-rate ones are cached once per method.
Promotional strategies are built per call: the threshold comes from the
client, so caching by threshold would grow without bound in a worker.
"""

from shipping_quote.domain.errors import InvalidArgument
from shipping_quote.domain.models import DEFAULT_FREE_SHIPPING_THRESHOLD, ShippingMethod
from shipping_quote.domain.pricing import (
    EconomyShipping,
    FastShipping,
    Number,
    PickupShipping,
    PromotionalFreeShipping,
    ShippingStrategy,
)


class StrategyFactory:
    """Lazily creates and caches fixed-rate strategies (class-level singletons)."""

    _fast: FastShipping | None = None
    _economy: EconomyShipping | None = None
    _pickup: PickupShipping | None = None

    @classmethod
    def get_fast(cls) -> FastShipping:
        if cls._fast is None:
            cls._fast = FastShipping()
        return cls._fast

    @classmethod
    def get_economy(cls) -> EconomyShipping:
        if cls._economy is None:
            cls._economy = EconomyShipping()
        return cls._economy

    @classmethod
    def get_pickup(cls) -> PickupShipping:
        if cls._pickup is None:
            cls._pickup = PickupShipping()
        return cls._pickup

    @classmethod
    def get_promotional(cls, threshold: Number = DEFAULT_FREE_SHIPPING_THRESHOLD) -> PromotionalFreeShipping:
        if threshold is None:
            raise InvalidArgument("threshold")
        return PromotionalFreeShipping(threshold)

    @classmethod
    def get_strategy(
        cls,
        method: ShippingMethod,
        threshold: Number = DEFAULT_FREE_SHIPPING_THRESHOLD,
    ) -> ShippingStrategy:
        """Return the strategy for `method`. `threshold` only matters for PROMOTIONAL."""
        if method is None:
            raise InvalidArgument("method")
        method = ShippingMethod(method)
        if method is ShippingMethod.FAST:
            return cls.get_fast()
        if method is ShippingMethod.ECONOMY:
            return cls.get_economy()
        if method is ShippingMethod.PICKUP:
            return cls.get_pickup()
        return cls.get_promotional(threshold)
