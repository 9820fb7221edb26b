"""
Temporal worker — polls the shipping quote task queue.

A **worker** is a long-running process that connects to the Temporal server
and polls a **task queue** for work. When the server has a workflow task
ready (a quote was started, signalled or queried, or its TTL timer fired), it
dispatches it to a worker listening on the matching task queue.

The worker must register the **workflows** it can execute (here:
ShippingQuoteWorkflow). Shipping strategies run inside the workflow, so there
are no activities to register.

Multiple workers can poll the same task queue for horizontal scaling.

Run with:
    python -m shipping_quote.worker
"""

import asyncio
import logging

# Client connects to the Temporal server (settings.temporal_address).
from temporalio.client import Client

# pydantic_data_converter lets the SDK serialize/deserialize Pydantic v2
# models (QuoteRequest, ShippingMethodChange, ShippingQuote) and their Decimal
# fields across the wire.
# IMPORTANT: The same data_converter must be used on both the worker AND the
# client, otherwise deserialization will fail.
from temporalio.contrib.pydantic import pydantic_data_converter

# Worker is the main event loop that polls the Temporal server for tasks.
from temporalio.worker import Worker

from shipping_quote.config import settings
from shipping_quote.workflows import ShippingQuoteWorkflow


async def run_worker() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logger = logging.getLogger(__name__)

    client = await Client.connect(settings.temporal_address, data_converter=pydantic_data_converter)
    logger.info("Connected to Temporal at %s — starting worker on queue %r", settings.temporal_address, settings.task_queue)

    # Create and start the worker. It will:
    #   1. Poll the task queue for workflow tasks.
    #   2. Run ShippingQuoteWorkflow when a quote is started.
    #   3. Deliver signals and answer queries for open quotes.
    worker = Worker(
        client,
        task_queue=settings.task_queue,
        workflows=[ShippingQuoteWorkflow],
    )
    # worker.run() blocks until the worker is shut down (e.g., via Ctrl+C).
    await worker.run()


def main() -> None:
    asyncio.run(run_worker())


if __name__ == "__main__":
    main()
