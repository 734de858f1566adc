"""
Pydantic models for the graph snapshot.

Field aliases follow the subgraph schema (arrivals, hats, artifacts, _meta);
attribute names follow the monitor's vocabulary (transfers, achievements).
BigInt fields arrive as strings and are coerced to int.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class _GraphModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class Player(_GraphModel):
    id: str


class Planet(_GraphModel):
    id: str
    speed: NonNegativeInt = 0


class Transfer(_GraphModel):
    id: str
    transfer_id: NonNegativeInt = Field(alias="arrivalId")
    arrival_time: NonNegativeInt = Field(alias="arrivalTime")
    departure_time: NonNegativeInt = Field(alias="departureTime")
    value_moved: NonNegativeInt = Field(default=0, alias="milliSilverMoved")
    player: Player
    origin: Planet = Field(alias="fromPlanet")


class Achievement(_GraphModel):
    id: str
    rank: NonNegativeInt = Field(alias="hatLevel")
    player: Player
    planet: Planet


class Artifact(_GraphModel):
    id: str
    rarity: str
    tier: NonNegativeInt = Field(alias="planetLevel")
    discoverer: Player
    location: Planet = Field(alias="planetDiscoveredOn")


class Block(_GraphModel):
    number: NonNegativeInt
    hash: Optional[str] = None


class IndexingMeta(_GraphModel):
    has_indexing_errors: bool = Field(alias="hasIndexingErrors")
    deployment: Optional[str] = None
    block: Optional[Block] = None

    @property
    def block_number(self) -> Optional[int]:
        return self.block.number if self.block else None


class EventSnapshot(_GraphModel):
    # ordered by arrival time, the last one is the most recent
    transfers: List[Transfer] = Field(default_factory=list, alias="arrivals")
    achievements: List[Achievement] = Field(default_factory=list, alias="hats")
    artifacts: List[Artifact] = Field(default_factory=list)
    indexing: IndexingMeta = Field(alias="graph_meta")

    @property
    def achievement(self) -> Optional[Achievement]:
        return self.achievements[0] if self.achievements else None

    @property
    def artifact(self) -> Optional[Artifact]:
        return self.artifacts[0] if self.artifacts else None
