"""
Poller configurations: which source feeds which rules.
"""
from functools import partial

from ..core.config import ThresholdsConfig
from ..core.filters.thresholds import evaluate_event_snapshot, evaluate_ledger_metrics
from ..core.state import MonitorState, SharedState
from ..fetch_data.graph import EventSnapshot, GraphClient
from ..fetch_data.ledger import LedgerClient, LedgerMetrics
from .periodic import PollingTask


def build_event_poller(
    shared: SharedState,
    graph: GraphClient,
    thresholds: ThresholdsConfig,
    interval_sec: float,
    **kwargs,
) -> PollingTask[EventSnapshot]:
    async def fetch(state: MonitorState) -> EventSnapshot:
        return await graph.fetch_event_snapshot(
            min_achievement_rank=state.achievement_rank,
            min_artifact_tier=state.artifact_tier,
        )

    return PollingTask(
        name="event-poller",
        interval_sec=interval_sec,
        shared=shared,
        fetch=fetch,
        evaluate=partial(evaluate_event_snapshot, thresholds=thresholds),
        **kwargs,
    )


def build_ledger_poller(
    shared: SharedState,
    ledger: LedgerClient,
    thresholds: ThresholdsConfig,
    interval_sec: float,
    **kwargs,
) -> PollingTask[LedgerMetrics]:
    async def fetch(state: MonitorState) -> LedgerMetrics:
        return await ledger.fetch_ledger_metrics()

    return PollingTask(
        name="ledger-poller",
        interval_sec=interval_sec,
        shared=shared,
        fetch=fetch,
        evaluate=partial(evaluate_ledger_metrics, thresholds=thresholds),
        **kwargs,
    )
