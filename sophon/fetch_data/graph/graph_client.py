"""
Graph client: one GraphQL query returning everything the event rules need.

The query asks for the unprocessed arrivals, the first hat above the rank
floor, the first artifact above the tier floor and the indexer health.
"""
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ...core.errors import FetchError
from .models import EventSnapshot

logger = logging.getLogger(__name__)


class GraphFetchError(FetchError):
    """Raised when the subgraph cannot be queried or its answer cannot be parsed."""


SNAPSHOT_QUERY = """
query sophon($hat_level: Int!, $planet_level: Int!) {
    arrivals(where: {processedAt: null}, orderBy: arrivalTime, orderDirection: asc) {
        id
        arrivalId
        arrivalTime
        departureTime
        milliSilverMoved
        player {
          id
        }
        fromPlanet {
          id
          speed
        }
    }
    hats(first: 1, where: {hatLevel_gt: $hat_level}, orderBy: hatLevel, orderDirection: asc) {
        id
        hatLevel
        planet {
          id
          speed
        }
        player {
          id
        }
    }
    artifacts(first: 1, where: {planetLevel_gt: $planet_level}, orderBy: artifactId, orderDirection: asc) {
        id
        rarity
        planetLevel
        discoverer {
          id
        }
        planetDiscoveredOn {
          id
          speed
        }
    }
    graph_meta: _meta {
        deployment
        hasIndexingErrors
        block {
            number
            hash
        }
    }
}
"""


class GraphClient:
    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _post(self, payload: dict[str, Any]) -> Any:
        try:
            resp = await self._client.post(self.url, json=payload)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as e:
            raise GraphFetchError(f"graph request failed: {type(e).__name__}: {e}") from e
        except ValueError as e:
            raise GraphFetchError(f"graph returned invalid json: {e}") from e

    async def fetch_event_snapshot(self, min_achievement_rank: int, min_artifact_tier: int) -> EventSnapshot:
        body = await self._post({
            "query": SNAPSHOT_QUERY,
            "variables": {
                "hat_level": min_achievement_rank,
                "planet_level": min_artifact_tier,
            },
        })

        if not isinstance(body, dict):
            raise GraphFetchError(f"unexpected graph response: {body!r}")
        if body.get("errors"):
            raise GraphFetchError(f"graph query errors: {body['errors']}")

        data = body.get("data")
        if data is None:
            raise GraphFetchError("graph response has no data")

        try:
            snapshot = EventSnapshot.model_validate(data)
        except ValidationError as e:
            raise GraphFetchError(f"graph response does not match schema: {e}") from e

        logger.debug(
            f"graph snapshot: transfers={len(snapshot.transfers)} "
            f"block={snapshot.indexing.block_number} "
            f"indexing_errors={snapshot.indexing.has_indexing_errors}"
        )
        return snapshot
