"""
Ledger client: read-only calls against the game contract over JSON-RPC.

Only three view functions are used, so the ABI is kept inline instead of
shipping the full contract ABI file.
"""
import asyncio
import logging
from typing import Any, Optional

from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from ...core.errors import FetchError
from .models import PLANET_LEVELS, LedgerMetrics

logger = logging.getLogger(__name__)


class LedgerFetchError(FetchError):
    """Raised when a contract call fails or returns something unusable."""


LEDGER_ABI = [
    {
        "inputs": [],
        "name": "worldRadius",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "getNPlayers",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "name": "initializedPlanetCountByLevel",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]


class LedgerClient:
    def __init__(
        self,
        rpc_url: str,
        contract_address: str,
        timeout: float = 30.0,
        contract: Optional[Any] = None,
        provider: Optional[Any] = None,
    ):
        self._provider = provider
        if contract is None:
            self._provider = provider or AsyncHTTPProvider(rpc_url, request_kwargs={"timeout": timeout})
            w3 = AsyncWeb3(self._provider)
            contract = w3.eth.contract(
                address=Web3.to_checksum_address(contract_address),
                abi=LEDGER_ABI,
            )
        self._contract = contract

    async def close(self) -> None:
        if self._provider is not None:
            await self._provider.disconnect()

    async def _call(self, fn_name: str, *args: Any) -> int:
        try:
            result = await getattr(self._contract.functions, fn_name)(*args).call()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise LedgerFetchError(f"{fn_name}{args} failed: {type(e).__name__}: {e}") from e

        try:
            value = int(result)
        except (TypeError, ValueError) as e:
            raise LedgerFetchError(f"{fn_name}{args} returned non-integer {result!r}") from e
        if value < 0:
            raise LedgerFetchError(f"{fn_name}{args} returned negative {value}")
        return value

    async def fetch_ledger_metrics(self) -> LedgerMetrics:
        world_radius = await self._call("worldRadius")
        player_count = await self._call("getNPlayers")
        logger.debug(f"ledger metrics: world_radius={world_radius} player_count={player_count}")
        return LedgerMetrics(world_radius=world_radius, player_count=player_count)

    async def fetch_ledger_counts(self) -> list[int]:
        counts = await asyncio.gather(
            *(self._call("initializedPlanetCountByLevel", level) for level in range(PLANET_LEVELS))
        )
        return list(counts)
