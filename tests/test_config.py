"""Tests for environment-driven settings."""
from decimal import Decimal

import pytest

from shipping_quote.config import load_settings


def test_defaults(monkeypatch):
    for name in ("TEMPORAL_ADDRESS", "SHIPPING_TASK_QUEUE", "FREE_SHIPPING_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)
    settings = load_settings()
    assert settings.temporal_address == "localhost:7233"
    assert settings.task_queue == "shipping-quotes"
    assert settings.free_shipping_threshold == Decimal("300.00")


def test_overrides(monkeypatch):
    monkeypatch.setenv("TEMPORAL_ADDRESS", "temporal:7233")
    monkeypatch.setenv("SHIPPING_TASK_QUEUE", "quotes-eu")
    monkeypatch.setenv("FREE_SHIPPING_THRESHOLD", "150.50")
    settings = load_settings()
    assert settings.temporal_address == "temporal:7233"
    assert settings.task_queue == "quotes-eu"
    assert settings.free_shipping_threshold == Decimal("150.50")


def test_malformed_threshold_names_variable(monkeypatch):
    monkeypatch.setenv("FREE_SHIPPING_THRESHOLD", "three hundred")
    with pytest.raises(ValueError, match="FREE_SHIPPING_THRESHOLD"):
        load_settings()
