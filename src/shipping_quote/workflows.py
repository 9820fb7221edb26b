"""
Temporal workflow — ShippingQuoteWorkflow.

Hosts one `Order` as a durable shipping quote. While the quote is open the
customer may switch shipping methods any number of times; each switch is a
runtime strategy replacement on the order. The quote closes when it is
confirmed or when its TTL elapses.

A Temporal **workflow** is a durable function: the server records every
signal and timer in the workflow's history, so if the worker crashes the
quote is rebuilt by replaying that history — including every strategy swap.

Key constraints inside a workflow:
  - Must be **deterministic**: no I/O, no randomness, no system clock.
    Shipping strategies are pure Decimal arithmetic, so they run in-workflow.
  - Use `workflow.wait_condition(...)` / timers instead of `asyncio.sleep`
    against the wall clock.
  - Use `workflow.logger` instead of the stdlib `logging` module.
"""

import asyncio
from datetime import timedelta

# `workflow` is the core Temporal SDK module for defining workflows.
# It provides decorators (@workflow.defn, @workflow.init, @workflow.run,
# @workflow.signal, @workflow.query) and helpers (wait_condition, logger).
from temporalio import workflow

# ── Sandbox-safe imports ─────────────────────────────────────────────
# Temporal runs workflows inside a restricted sandbox that intercepts imports
# to enforce determinism. Pydantic and our own modules use constructs the
# sandbox would flag, so we wrap them with
# `workflow.unsafe.imports_passed_through()`.
# This is safe because the imported code only models data and does
# deterministic Decimal arithmetic — no side-effects at import time.
with workflow.unsafe.imports_passed_through():
    from shipping_quote.domain.models import QuoteRequest, QuoteStatus, ShippingMethodChange, ShippingQuote
    from shipping_quote.domain.order import Order
    from shipping_quote.services.factory import StrategyFactory


def build_order(req: QuoteRequest) -> Order:
    """Create the Order for a request with its initial shipping strategy."""
    return Order(
        req.order_id,
        price_before_shipping=req.price_before_shipping,
        weight_kg=req.weight_kg,
        distance_km=req.distance_km,
        initial_strategy=StrategyFactory.get_strategy(req.method, req.free_shipping_threshold),
    )


# @workflow.defn — marks this class as a Temporal workflow definition.
# The worker registers it and the server can schedule executions.
@workflow.defn
class ShippingQuoteWorkflow:
    """Keeps a shipping quote open until it is confirmed or expires.

    Execution flow:
        1. Build the Order with its initial strategy (in `__init__`)
        2. Apply `change_shipping_method` signals as they arrive
        3. Close as CONFIRMED on `confirm`, or as EXPIRED after the TTL

    Supports:
        - **Signal** `change_shipping_method`: swap the order's strategy.
        - **Signal** `confirm`: close the quote as CONFIRMED.
        - **Query** `get_quote`: live snapshot of method, cost and total.
    """

    # @workflow.init receives the same input as the run method, before any
    # signal handler runs. Signals delivered together with the start request
    # (signal-with-start) therefore always find an order to update.
    @workflow.init
    def __init__(self, req: QuoteRequest) -> None:
        self.order = build_order(req)
        self.confirmed = False
        self.changes = 0

    # ── Signals ───────────────────────────────────────────────────
    # A **signal** is an async message sent to a running workflow from the
    # outside. It mutates workflow state but returns nothing to the sender.
    # Signals are recorded in history, so replays re-apply the same swaps
    # in the same order.

    @workflow.signal
    def change_shipping_method(self, change: ShippingMethodChange) -> None:
        self.order.set_strategy(StrategyFactory.get_strategy(change.method, change.free_shipping_threshold))
        self.changes += 1

    @workflow.signal
    def confirm(self) -> None:
        # Wakes the wait_condition in `run`.
        self.confirmed = True

    # ── Query ─────────────────────────────────────────────────────
    # A **query** is a synchronous, read-only inspection of workflow state.
    # It MUST NOT mutate state. Strategies are pure, so computing cost and
    # total here is allowed.

    @workflow.query
    def get_quote(self) -> ShippingQuote:
        return self._quote(None)

    # ── Helpers ──────────────────────────────────────────────────

    def _quote(self, status: QuoteStatus | None) -> ShippingQuote:
        """Build a ShippingQuote snapshot from the current order."""
        return ShippingQuote(
            order_id=self.order.id,
            method_name=self.order.shipping_method_name,
            price_before_shipping=self.order.price_before_shipping,
            weight_kg=self.order.weight_kg,
            distance_km=self.order.distance_km,
            shipping_cost=self.order.calculate_shipping(),
            total=self.order.total(),
            status=status,
        )

    # ── Run (main workflow logic) ────────────────────────────────
    # @workflow.run — marks the entry-point method. Its signature defines the
    # workflow's input and result types.

    @workflow.run
    async def run(self, req: QuoteRequest) -> ShippingQuote:
        # workflow.logger is a sandbox-safe logger provided by Temporal.
        workflow.logger.info(
            "Quote %s opened — %s, shipping %s, total %s",
            req.order_id,
            self.order.shipping_method_name,
            self.order.calculate_shipping(),
            self.order.total(),
        )

        # wait_condition suspends the workflow until the predicate is true.
        # It is re-evaluated after every signal. The timeout is a durable
        # server-side timer: it survives worker restarts, and raises
        # asyncio.TimeoutError when it fires first.
        try:
            await workflow.wait_condition(
                lambda: self.confirmed,
                timeout=timedelta(seconds=req.quote_ttl_seconds),
            )
        except asyncio.TimeoutError:
            workflow.logger.info("Quote %s expired after %d method change(s)", req.order_id, self.changes)
            return self._quote(QuoteStatus.EXPIRED)

        workflow.logger.info("Quote %s confirmed with %s", req.order_id, self.order.shipping_method_name)
        return self._quote(QuoteStatus.CONFIRMED)
