"""
Counts Monitor - low-frequency planet totals report.

Sent straight to the channel instead of through the queue: a dropped report
is harmless and the next run sends a fresh one.
"""
import asyncio
import logging
from typing import Awaitable, Callable

from ..fetch_data.ledger import PLANET_LEVELS, LedgerClient, LedgerFetchError
from ..telegram import formatter
from .delivery_pump import AlertChannel
from .periodic import Periodic

logger = logging.getLogger(__name__)


class CountsReporter(Periodic):
    def __init__(
        self,
        ledger: LedgerClient,
        channel: AlertChannel,
        interval_sec: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        super().__init__("counts-reporter", interval_sec, sleep=sleep)
        self.ledger = ledger
        self.channel = channel

    async def run_once(self) -> bool:
        try:
            counts = await self.ledger.fetch_ledger_counts()
            if len(counts) != PLANET_LEVELS:
                raise LedgerFetchError(f"expected {PLANET_LEVELS} level counts, got {len(counts)}")
            await self.channel.publish(formatter.planet_counts(counts))
        except Exception as e:
            self.handle_error(e)
            return False

        logger.info(f"[{self.name}] planet totals sent: {counts}")
        return True
