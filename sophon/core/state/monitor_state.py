"""
Monitor state model.

One record holds every high-water mark the alert rules have fired for plus
the queue of alerts still waiting to go out. It is persisted as a single
JSON object.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


HIGH_WATER_FIELDS = (
    "most_pending_transfers",
    "significant_transfer_id",
    "longest_transfer_duration",
    "most_value_moved",
    "achievement_rank",
    "artifact_tier",
    "significant_radius",
    "significant_player_count",
)


class MonitorState(BaseModel):
    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    # max simultaneous in-flight transfers ever observed
    most_pending_transfers: NonNegativeInt = 0
    # n hundred thousandth transfer already alerted
    significant_transfer_id: NonNegativeInt = 0
    # speed-normalized arrival - departure, seconds
    longest_transfer_duration: NonNegativeInt = 0
    # whale alert, smallest currency unit
    most_value_moved: NonNegativeInt = 0
    achievement_rank: NonNegativeInt = 0
    # sliding floor, advanced by a fixed step per alert
    artifact_tier: NonNegativeInt = 0
    significant_radius: NonNegativeInt = 0
    significant_player_count: NonNegativeInt = 0
    # alerts scheduled to go out, oldest first
    pending_alerts: List[str] = Field(default_factory=list)

    def high_water_marks(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in HIGH_WATER_FIELDS}
