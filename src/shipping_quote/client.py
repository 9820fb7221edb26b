"""
CLI client — opens a shipping quote, optionally switches methods, confirms it.

Usage:
    # Quote with Economy and confirm immediately:
    python -m shipping_quote.client --order-id PED100 --price 250 --weight 3.0 --distance 320 --method ECONOMY

    # Switch to Fast, then to the promotion, query after each switch:
    python -m shipping_quote.client --order-id PED100 --price 250 --weight 3.0 --distance 320 \\
        --method ECONOMY --switch-to FAST --switch-to PROMOTIONAL --query

    # Leave the quote open (it expires after --ttl seconds):
    python -m shipping_quote.client --order-id PED200 --price 80 --weight 1 --distance 0 --method PICKUP --no-confirm
"""

import argparse
import asyncio
import logging
from decimal import Decimal

# Client is the Temporal SDK's entry point for interacting with the server.
# It can start workflows, send signals, run queries, and fetch results.
from temporalio.client import Client

# Must match the data_converter used by the worker — see worker.py.
from temporalio.contrib.pydantic import pydantic_data_converter

from shipping_quote.config import settings
from shipping_quote.domain.models import QuoteRequest, ShippingMethod, ShippingMethodChange
from shipping_quote.workflows import ShippingQuoteWorkflow

METHOD_CHOICES = [m.value for m in ShippingMethod]


async def run_client(args: argparse.Namespace) -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logger = logging.getLogger(__name__)

    # Connect with the Pydantic data converter so that QuoteRequest,
    # ShippingMethodChange and ShippingQuote (with their Decimal fields)
    # serialize and deserialize correctly.
    client = await Client.connect(settings.temporal_address, data_converter=pydantic_data_converter)

    # Validation (non-negative amounts, known method) happens here, before
    # anything is sent to the server.
    req = QuoteRequest(
        order_id=args.order_id,
        price_before_shipping=args.price,
        weight_kg=args.weight,
        distance_km=args.distance,
        method=ShippingMethod(args.method),
        free_shipping_threshold=args.threshold,
        quote_ttl_seconds=args.ttl,
    )
    workflow_id = f"quote-{req.order_id}"

    logger.info("Starting workflow %s", workflow_id)

    # start_workflow sends an execution request to the Temporal server. The
    # server enqueues a task on the task queue and a worker picks it up.
    # `handle` is a lightweight reference to the running workflow.
    handle = await client.start_workflow(
        ShippingQuoteWorkflow.run,       # type-safe reference to the run method
        req,                             # workflow input (serialized via pydantic_data_converter)
        id=workflow_id,                  # one open quote per order
        task_queue=settings.task_queue,  # routes to workers polling this queue
    )

    # Query: read-only inspection of the live quote. Does NOT affect execution.
    if args.query:
        quote = await handle.query(ShippingQuoteWorkflow.get_quote)
        logger.info("Quote: %s — shipping %s, total %s", quote.method_name, quote.shipping_cost, quote.total)

    # Signal: each switch replaces the order's shipping strategy inside the
    # running workflow. Signals are applied in the order they are sent.
    for method in args.switch_to:
        logger.info("Switching %s to %s", workflow_id, method)
        await handle.signal(
            ShippingQuoteWorkflow.change_shipping_method,
            ShippingMethodChange(method=ShippingMethod(method), free_shipping_threshold=args.threshold),
        )
        if args.query:
            quote = await handle.query(ShippingQuoteWorkflow.get_quote)
            logger.info("Quote: %s — shipping %s, total %s", quote.method_name, quote.shipping_cost, quote.total)

    # Without a confirm signal the workflow waits out its TTL and closes as EXPIRED.
    if not args.no_confirm:
        await handle.signal(ShippingQuoteWorkflow.confirm)

    # Block until the workflow completes. The ShippingQuote result is
    # deserialized back into a Pydantic model automatically.
    result = await handle.result()
    print(result.model_dump_json(indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Quote shipping for an order via Temporal")
    parser.add_argument("--order-id", required=True, help="Unique order identifier")
    parser.add_argument("--price", required=True, type=Decimal, help="Goods price before shipping")
    parser.add_argument("--weight", required=True, type=Decimal, help="Weight in kg")
    parser.add_argument("--distance", required=True, type=Decimal, help="Distance in km")
    parser.add_argument("--method", required=True, choices=METHOD_CHOICES, help="Initial shipping method")
    parser.add_argument(
        "--threshold",
        type=Decimal,
        default=settings.free_shipping_threshold,
        help="Free shipping threshold for PROMOTIONAL",
    )
    parser.add_argument(
        "--switch-to",
        action="append",
        default=[],
        choices=METHOD_CHOICES,
        help="Shipping method to switch to (repeatable, applied in order)",
    )
    parser.add_argument("--ttl", type=float, default=3600.0, help="Seconds before an unconfirmed quote expires")
    parser.add_argument("--query", action="store_true", help="Query the quote after starting and after each switch")
    parser.add_argument("--no-confirm", action="store_true", help="Do not confirm; wait for the quote to expire")
    asyncio.run(run_client(parser.parse_args()))


if __name__ == "__main__":
    main()
