"""
Delivery Pump - drains the alert queue one message per interval.

The head is only popped after the channel confirms it, so delivery is
at-least-once and strictly ordered. A head that keeps failing blocks every
alert behind it; it is retried every interval with no backoff and no
dead-lettering.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Protocol

from ..core.state import SharedState
from .periodic import Periodic

logger = logging.getLogger(__name__)


class AlertChannel(Protocol):
    async def publish(self, msg: str) -> None: ...


class DeliveryPump(Periodic):
    def __init__(
        self,
        shared: SharedState,
        channel: AlertChannel,
        interval_sec: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        super().__init__("delivery-pump", interval_sec, sleep=sleep)
        self.shared = shared
        self.channel = channel

    async def run_once(self) -> bool:
        async with self.shared.lock:
            head = self.shared.queue.peek()
            backlog = len(self.shared.queue)

        if head is None:
            return False

        try:
            await self.channel.publish(head)
        except Exception as e:
            self.handle_error(e)
            logger.info(f"[{self.name}] head kept for retry, backlog={backlog}")
            return False

        # the pump is the only consumer, so the head is still the message just sent
        async with self.shared.lock:
            self.shared.queue.pop_head()
            self.shared.mark_dirty()
            self.shared.flush()

        logger.info(f"[{self.name}] delivered, backlog={backlog - 1}")
        return True
