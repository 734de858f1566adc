import asyncio
import logging
from typing import Optional

from ..core.errors import DeliveryError
from .rate_limiter import AsyncRateLimiter
from .telegramNotifier import TelegramNotifier

logger = logging.getLogger(__name__)


class TG_bot:
    """
    The single outbound channel.

    Sends are serialized through a lock and spaced by the rate limiter, so at
    most one message is in flight no matter how many tasks publish. With
    dry_run set, messages are only logged and count as delivered.
    """

    def __init__(
        self,
        name: str,
        notifier: Optional[TelegramNotifier],
        max_messages_per_second: float = 1.0,
        dry_run: bool = False,
    ):
        if notifier is None and not dry_run:
            raise ValueError("a notifier is required unless dry_run is set")
        self.name = name
        self.notifier = notifier
        self.dry_run = dry_run
        self._send_lock = asyncio.Lock()
        self._limiter = AsyncRateLimiter(max_messages_per_second)

    @classmethod
    def from_env(cls, name: str, env_config) -> "TG_bot":
        if not env_config.TELEGRAM_ENABLED:
            logger.info("telegram disabled (TELEGRAM_ENABLED=false), running in dry-run")
            return cls(name=name, notifier=None, dry_run=True)

        notifier = TelegramNotifier(
            token=env_config.TELEGRAM_BOT_TOKEN,
            chat_id=env_config.TELEGRAM_CHAT_ID,
        )
        return cls(
            name=name,
            notifier=notifier,
            max_messages_per_second=env_config.TELEGRAM_MAX_MSG_PER_SEC,
        )

    async def publish(self, msg: str) -> None:
        """
        Deliver one message.

        Raises:
            DeliveryError: the transport did not confirm the message
        """
        async with self._send_lock:
            await self._limiter.acquire()

            if self.dry_run:
                logger.info(f"[DRY_RUN] {self.name} would send: {msg}")
                return

            assert self.notifier is not None
            success, detail = await self.notifier.send_message(text=msg)
            if not success:
                raise DeliveryError(f"{self.name} bot failed to send: {detail}")
            logger.info(f"{self.name} bot sent message_id={detail}")

    async def close(self) -> None:
        if self.notifier is not None:
            await self.notifier.close()
