from dataclasses import dataclass

# initializedPlanetCountByLevel is indexed 0..7
PLANET_LEVELS = 8


@dataclass(frozen=True)
class LedgerMetrics:
    world_radius: int
    player_count: int
