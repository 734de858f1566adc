"""
Threshold rules: decide which observations become alerts.

Every check_* function is pure. It looks at one snapshot and the current
state and returns ``(alert_text, new_high_water)``; ``alert_text`` is None
when the rule does not fire. Each rule fires at most once per snapshot.

evaluate_event_snapshot / evaluate_ledger_metrics bundle the rules into an
Evaluation, and apply_evaluation folds it back into the state without ever
lowering a high-water mark.
"""
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...fetch_data.graph.models import Achievement, Artifact, EventSnapshot, Transfer
from ...fetch_data.ledger.models import LedgerMetrics
from ...telegram import formatter
from ..config import ThresholdsConfig
from ..errors import IndexingError
from ..state.alert_queue import AlertQueue
from ..state.monitor_state import MonitorState

CheckResult = tuple[Optional[str], int]


@dataclass
class Evaluation:
    alerts: list[str] = field(default_factory=list)
    updates: dict[str, int] = field(default_factory=dict)

    def add(self, result: CheckResult, state_field: str) -> None:
        alert, value = result
        if alert is None:
            return
        self.alerts.append(alert)
        self.updates[state_field] = value

    def __bool__(self) -> bool:
        return bool(self.alerts or self.updates)


def milestone(value: int, step: int) -> int:
    """Round a non-negative value down to a multiple of step."""
    if value < 0:
        raise ValueError(f"milestone of negative value {value}")
    if step <= 0:
        raise ValueError(f"milestone step must be positive, got {step}")
    return (value // step) * step


def normalized_duration(transfer: Transfer) -> Optional[int]:
    """
    Travel time scaled to a speed-100 origin: (arrival - departure) / (speed / 100).

    Returns None for transfers that cannot be normalized (zero speed or
    arrival before departure).
    """
    elapsed = transfer.arrival_time - transfer.departure_time
    if elapsed < 0 or transfer.origin.speed <= 0:
        return None
    return elapsed * 100 // transfer.origin.speed


# ==================== Event snapshot rules ====================

def check_transfer_milestone(
    transfers: Sequence[Transfer], state: MonitorState, step: int
) -> CheckResult:
    if not transfers:
        return None, state.significant_transfer_id

    significant = milestone(transfers[-1].transfer_id, step)
    if significant > state.significant_transfer_id:
        return formatter.transfer_milestone(significant), significant
    return None, state.significant_transfer_id


def check_congestion(transfers: Sequence[Transfer], state: MonitorState) -> CheckResult:
    in_motion = len(transfers)
    if in_motion > state.most_pending_transfers:
        return formatter.congestion(in_motion), in_motion
    return None, state.most_pending_transfers


def check_achievement(achievement: Optional[Achievement], state: MonitorState) -> CheckResult:
    if achievement is None or achievement.rank <= state.achievement_rank:
        return None, state.achievement_rank
    return (
        formatter.achievement(achievement.rank, achievement.player.id, achievement.planet.id),
        achievement.rank,
    )


def check_artifact(artifact: Optional[Artifact], state: MonitorState, step: int) -> CheckResult:
    # the floor moves by step, not to the observed tier
    if artifact is None or artifact.tier <= state.artifact_tier:
        return None, state.artifact_tier
    return (
        formatter.artifact(artifact.rarity, artifact.tier, artifact.location.id, artifact.discoverer.id),
        state.artifact_tier + step,
    )


def check_longest_transfer(transfers: Sequence[Transfer], state: MonitorState) -> CheckResult:
    longest: Optional[Transfer] = None
    longest_duration = -1
    for transfer in transfers:
        duration = normalized_duration(transfer)
        if duration is not None and duration > longest_duration:
            longest, longest_duration = transfer, duration

    if longest is None or longest_duration <= state.longest_transfer_duration:
        return None, state.longest_transfer_duration
    return formatter.longest_transfer(longest_duration, longest.player.id), longest_duration


def check_value_moved(
    transfers: Sequence[Transfer], state: MonitorState, unit_divisor: int
) -> CheckResult:
    if not transfers:
        return None, state.most_value_moved

    # first transfer wins ties
    whale = max(transfers, key=lambda t: t.value_moved)
    if whale.value_moved <= state.most_value_moved:
        return None, state.most_value_moved
    return (
        formatter.value_moved(whale.value_moved // unit_divisor, whale.player.id),
        whale.value_moved,
    )


def evaluate_event_snapshot(
    snapshot: EventSnapshot, state: MonitorState, thresholds: ThresholdsConfig
) -> Evaluation:
    """
    Run every event rule against one graph snapshot.

    Raises:
        IndexingError: the source flagged the snapshot; nothing is evaluated
    """
    if snapshot.indexing.has_indexing_errors:
        raise IndexingError(
            f"graph reports indexing errors at block {snapshot.indexing.block_number}"
        )

    transfers = snapshot.transfers
    evaluation = Evaluation()
    evaluation.add(
        check_transfer_milestone(transfers, state, thresholds.transfer_id_step),
        "significant_transfer_id",
    )
    evaluation.add(check_congestion(transfers, state), "most_pending_transfers")
    evaluation.add(check_achievement(snapshot.achievement, state), "achievement_rank")
    evaluation.add(
        check_artifact(snapshot.artifact, state, thresholds.artifact_tier_step),
        "artifact_tier",
    )
    evaluation.add(check_longest_transfer(transfers, state), "longest_transfer_duration")
    evaluation.add(
        check_value_moved(transfers, state, thresholds.value_unit_divisor),
        "most_value_moved",
    )
    return evaluation


# ==================== Ledger rules ====================

def check_radius(world_radius: int, state: MonitorState, step: int) -> CheckResult:
    significant = milestone(world_radius, step)
    if significant > state.significant_radius:
        return formatter.radius(significant), significant
    return None, state.significant_radius


def check_player_count(player_count: int, state: MonitorState, step: int) -> CheckResult:
    significant = milestone(player_count, step)
    if significant > state.significant_player_count:
        return formatter.player_count(significant), significant
    return None, state.significant_player_count


def evaluate_ledger_metrics(
    metrics: LedgerMetrics, state: MonitorState, thresholds: ThresholdsConfig
) -> Evaluation:
    evaluation = Evaluation()
    evaluation.add(
        check_radius(metrics.world_radius, state, thresholds.radius_step),
        "significant_radius",
    )
    evaluation.add(
        check_player_count(metrics.player_count, state, thresholds.player_count_step),
        "significant_player_count",
    )
    return evaluation


def apply_evaluation(state: MonitorState, evaluation: Evaluation) -> bool:
    """
    Fold an evaluation into the state. Marks only ever move up and alerts go
    to the back of the queue.

    Returns:
        True if anything in the state changed
    """
    changed = False
    for state_field, value in evaluation.updates.items():
        if value > getattr(state, state_field):
            setattr(state, state_field, value)
            changed = True

    if evaluation.alerts:
        AlertQueue(state).extend(evaluation.alerts)
        changed = True

    return changed
