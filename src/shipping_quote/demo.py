"""
Offline demo — prices a few sample orders and switches one order's shipping
strategy at runtime. No Temporal server is needed.

Run with:
    python -m shipping_quote.demo
"""

import logging
from decimal import Decimal

from shipping_quote.domain.order import Order
from shipping_quote.domain.pricing import EconomyShipping, FastShipping, PickupShipping, PromotionalFreeShipping

logger = logging.getLogger(__name__)


def format_summary(order: Order) -> str:
    return "\n".join(
        [
            f"Order: {order.id}",
            f" - Shipping method: {order.shipping_method_name}",
            f" - Goods: {order.price_before_shipping:.2f}",
            f" - Weight: {order.weight_kg} kg",
            f" - Distance: {order.distance_km} km",
            f" - Shipping: {order.calculate_shipping():.2f}",
            f" - Total (goods + shipping): {order.total():.2f}",
            "",
        ]
    )


def run_demo() -> list[str]:
    """Print every summary and return them (in print order)."""
    fast = FastShipping()
    economy = EconomyShipping()
    pickup = PickupShipping()
    promo = PromotionalFreeShipping(threshold=Decimal("300"))

    orders = [
        Order("PED001", Decimal("120.50"), Decimal("2.2"), Decimal("150"), economy),
        Order("PED002", Decimal("35.00"), Decimal("0.5"), Decimal("12"), fast),
        Order("PED003", Decimal("420.00"), Decimal("5.0"), Decimal("500"), promo),
        Order("PED004", Decimal("80.00"), Decimal("1.0"), Decimal("0"), pickup),
    ]

    summaries: list[str] = []

    def show(order: Order) -> None:
        summary = format_summary(order)
        summaries.append(summary)
        print(summary)

    print("=== Shipping cost calculator (Strategy pattern) ===\n")
    for order in orders:
        show(order)

    dynamic_order = Order("PED100", Decimal("250"), Decimal("3.0"), Decimal("320"), economy)
    print("--- Switching strategy at runtime ---")
    show(dynamic_order)

    for label, strategy in (("Fast", fast), ("Promotion (free shipping at 300.00 or more)", promo)):
        print(f"Applying {label}...")
        dynamic_order.set_strategy(strategy)
        show(dynamic_order)

    logger.info("Demo finished: %d summaries", len(summaries))
    return summaries


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    run_demo()


if __name__ == "__main__":
    main()
