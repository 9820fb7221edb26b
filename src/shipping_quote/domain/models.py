"""
Boundary models for the shipping quote workflow.

All models use Pydantic v2 BaseModel for validation, serialization and
deserialization. Temporal transmits workflow inputs, signal payloads, query
results and workflow results as JSON payloads — Pydantic models serialize
cleanly via the pydantic_data_converter configured on both the client and
the worker.

Money and measurements are `Decimal` (serialized as strings in JSON) so no
binary floating point sneaks into the pricing core. Non-negative checks live
here, at the boundary; the core itself does not validate numbers.

Enums inherit from (str, Enum) so they serialize as plain strings in JSON
(e.g. "FAST" instead of {"value": "FAST"}).
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_FREE_SHIPPING_THRESHOLD = Decimal("300.00")


class ShippingMethod(str, Enum):
    """Selectable shipping methods — mapped to strategies in services/factory.py."""

    FAST = "FAST"                # FastShipping
    ECONOMY = "ECONOMY"          # EconomyShipping
    PICKUP = "PICKUP"            # PickupShipping
    PROMOTIONAL = "PROMOTIONAL"  # PromotionalFreeShipping(threshold)


class QuoteStatus(str, Enum):
    """Terminal status of a shipping quote workflow."""

    CONFIRMED = "CONFIRMED"  # The customer confirmed the quote
    EXPIRED = "EXPIRED"      # The quote TTL elapsed without confirmation


# ── Workflow input / signals ─────────────────────────────────────────


class QuoteRequest(BaseModel):
    """Input to the shipping quote workflow.

    Passed from the client to `ShippingQuoteWorkflow.run()` via Temporal.
    """

    order_id: str = Field(..., min_length=1)
    price_before_shipping: Decimal = Field(..., ge=0)
    weight_kg: Decimal = Field(..., ge=0)
    distance_km: Decimal = Field(..., ge=0)
    method: ShippingMethod
    # Only used when method is PROMOTIONAL
    free_shipping_threshold: Decimal = Field(DEFAULT_FREE_SHIPPING_THRESHOLD, ge=0)
    quote_ttl_seconds: float = Field(3600.0, gt=0)


class ShippingMethodChange(BaseModel):
    """Payload for the change_shipping_method signal."""

    method: ShippingMethod
    free_shipping_threshold: Decimal = Field(DEFAULT_FREE_SHIPPING_THRESHOLD, ge=0)


# ── Query / workflow result ──────────────────────────────────────────


class ShippingQuote(BaseModel):
    """Snapshot of an order's shipping quote.

    Returned by the `get_quote` query while the workflow is open
    (status is None) and as the workflow result once it closes.
    """

    order_id: str
    method_name: str
    price_before_shipping: Decimal
    weight_kg: Decimal
    distance_km: Decimal
    shipping_cost: Decimal
    total: Decimal
    status: QuoteStatus | None = None
