"""Settings read from the environment, shared by the worker and the client."""

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Settings:
    temporal_address: str
    # The client specifies this when starting a workflow and the worker when
    # polling. They must match for work to be routed.
    task_queue: str
    free_shipping_threshold: Decimal


def _decimal_env(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"{name} must be a decimal number, got {raw!r}") from None


def load_settings() -> Settings:
    return Settings(
        temporal_address=os.getenv("TEMPORAL_ADDRESS", "localhost:7233"),
        task_queue=os.getenv("SHIPPING_TASK_QUEUE", "shipping-quotes"),
        free_shipping_threshold=_decimal_env("FREE_SHIPPING_THRESHOLD", "300.00"),
    )


settings = load_settings()
