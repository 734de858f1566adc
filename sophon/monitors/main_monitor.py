"""
Main Monitor - wires the periodic tasks together and runs them until shutdown.

Tasks:
- event-poller: graph snapshot -> transfer / achievement / artifact rules
- ledger-poller: world radius and player count rules
- delivery-pump: drains the alert queue
- counts-reporter: daily planet totals, sent directly

The tasks race a shutdown event. Whichever finishes first ends the run: the
event means a clean stop, a task finishing means it hit a fatal error, which
is re-raised after the other tasks are cancelled.
"""
import asyncio
import logging
from typing import Sequence

from ..core.config import Config
from ..core.state import SharedState
from ..fetch_data.graph import GraphClient
from ..fetch_data.ledger import LedgerClient
from .counts_monitor import CountsReporter
from .delivery_pump import AlertChannel, DeliveryPump
from .periodic import Periodic
from .pollers import build_event_poller, build_ledger_poller

logger = logging.getLogger(__name__)


def build_tasks(
    config: Config,
    shared: SharedState,
    graph: GraphClient,
    ledger: LedgerClient,
    channel: AlertChannel,
) -> list[Periodic]:
    schedule = config.schedule
    thresholds = config.thresholds
    return [
        build_event_poller(shared, graph, thresholds, schedule.event_interval_sec),
        build_ledger_poller(shared, ledger, thresholds, schedule.ledger_interval_sec),
        DeliveryPump(shared, channel, schedule.delivery_interval_sec),
        CountsReporter(ledger, channel, schedule.counts_interval_sec),
    ]


async def run_tasks(tasks: Sequence[Periodic], shutdown: asyncio.Event) -> None:
    running = [asyncio.create_task(task.run_forever(), name=task.name) for task in tasks]
    stopper = asyncio.create_task(shutdown.wait(), name="shutdown")

    try:
        done, _ = await asyncio.wait([*running, stopper], return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (*running, stopper):
            task.cancel()
        await asyncio.gather(*running, stopper, return_exceptions=True)

    if stopper in done:
        logger.info("shutdown signal received, periodic tasks stopped")
        return

    for task in done:
        exc = task.exception()
        if exc is not None:
            logger.error(f"[{task.get_name()}] fatal error, stopping monitor", exc_info=exc)
            raise exc
        logger.error(f"[{task.get_name()}] exited unexpectedly, stopping monitor")


async def run_monitor(
    config: Config,
    shared: SharedState,
    graph: GraphClient,
    ledger: LedgerClient,
    channel: AlertChannel,
    shutdown: asyncio.Event,
) -> None:
    tasks = build_tasks(config, shared, graph, ledger, channel)
    logger.info(f"Starting sophon monitor with tasks: {[task.name for task in tasks]}")

    try:
        await run_tasks(tasks, shutdown)
    finally:
        # retry a write that failed during the run
        async with shared.lock:
            shared.flush()
