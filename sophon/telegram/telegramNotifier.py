"""
TelegramNotifier: sends text messages through the Telegram Bot API.

aiohttp does not read proxy environment variables unless trust_env=True,
so every session is created with it.
"""
import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

import aiohttp


class TelegramNotifier:
    logger = logging.getLogger(__name__)

    def __init__(self, token: str, chat_id: str, timeout: float = 20.0):
        if not token or not chat_id:
            raise ValueError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID are required")

        self.token = token
        self.chat_id = chat_id
        self.base_url = f"https://api.telegram.org/bot{self.token}"
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(trust_env=True, timeout=self.timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def _request(self, method: str, payload: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
        """
        Call one Bot API method.

        Returns:
            (ok, message_id on success / error description on failure)
        """
        url = f"{self.base_url}/{method}"
        try:
            session = await self._get_session()
            async with session.post(url, json=payload) as resp:
                return await self._handle_response(resp)
        except aiohttp.ClientError as e:
            self.logger.error(f"Telegram request error: {type(e).__name__}: {e}")
            return False, f"{type(e).__name__}: {e}"
        except asyncio.TimeoutError:
            self.logger.error("Telegram request timed out")
            return False, "timeout"

    async def _handle_response(self, resp: aiohttp.ClientResponse) -> Tuple[bool, Optional[str]]:
        body = await resp.text()
        if resp.status != 200:
            self.logger.error(f"Telegram request failed, status: {resp.status}")
            self.logger.debug(body)
            return False, f"HTTP {resp.status}: {body}"

        try:
            data = await resp.json(content_type=None)
        except ValueError as e:
            self.logger.error(f"Failed to parse Telegram response: {e}")
            return False, f"invalid json: {e}"

        if not isinstance(data, dict):
            self.logger.error(f"Unexpected Telegram response: {data!r}")
            return False, f"unexpected response: {data!r}"

        if not data.get("ok"):
            self.logger.error(f"Telegram returned error: {data}")
            return False, str(data.get("description", data))

        result = data.get("result")
        msg_id = str(result.get("message_id")) if isinstance(result, dict) else None
        return True, msg_id

    async def send_message(self, text: str, disable_web_page_preview: bool = True) -> Tuple[bool, Optional[str]]:
        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "disable_web_page_preview": disable_web_page_preview,
        }
        return await self._request("sendMessage", payload)
