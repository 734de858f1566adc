"""
Periodic tasks.

Periodic owns the loop (run once, sleep, repeat) and PollingTask is the one
fetch-evaluate-apply cycle every poller shares. A new signal is a new
(fetch, evaluate) pair handed to PollingTask, not a new loop.

Errors are routed through ERROR_POLICY: skip-cycle and log-only errors end
the current cycle, anything else propagates and ends the process.
"""
import asyncio
import logging
from typing import Awaitable, Callable, Generic, TypeVar

from ..core.errors import ErrorAction, error_action
from ..core.filters.thresholds import Evaluation, apply_evaluation
from ..core.state import MonitorState, SharedState

logger = logging.getLogger(__name__)

SnapshotT = TypeVar("SnapshotT")

FetchFn = Callable[[MonitorState], Awaitable[SnapshotT]]
EvaluateFn = Callable[[SnapshotT, MonitorState], Evaluation]


class Periodic:
    def __init__(
        self,
        name: str,
        interval_sec: float,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.name = name
        self.interval_sec = interval_sec
        self._sleep = sleep

    async def run_once(self) -> bool:
        raise NotImplementedError

    def handle_error(self, exc: Exception) -> None:
        """Apply the error policy to an exception raised inside a cycle."""
        action = error_action(exc)
        if action is ErrorAction.FATAL:
            raise exc
        logger.warning(f"[{self.name}] {action.value}: {type(exc).__name__}: {exc}")

    async def run_forever(self) -> None:
        logger.info(f"[{self.name}] started, interval={self.interval_sec}s")
        while True:
            await self.run_once()
            await self._sleep(self.interval_sec)


class PollingTask(Periodic, Generic[SnapshotT]):
    """
    Fetch a snapshot, evaluate it against the state, fold in the result.

    The fetch runs outside the lock on a copy of the state (so a slow source
    does not stall the other tasks); evaluation and mutation run under the
    lock against the live state, which re-checks every threshold at the
    moment it is applied.
    """

    def __init__(
        self,
        name: str,
        interval_sec: float,
        shared: SharedState,
        fetch: FetchFn,
        evaluate: EvaluateFn,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        super().__init__(name, interval_sec, sleep=sleep)
        self.shared = shared
        self.fetch = fetch
        self.evaluate = evaluate

    async def run_once(self) -> bool:
        async with self.shared.lock:
            view = self.shared.state.model_copy(deep=True)

        try:
            snapshot = await self.fetch(view)
            async with self.shared.lock:
                evaluation = self.evaluate(snapshot, self.shared.state)
                changed = apply_evaluation(self.shared.state, evaluation)
                if changed:
                    self.shared.mark_dirty()
                self.shared.flush()
        except Exception as e:
            self.handle_error(e)
            return False

        for alert in evaluation.alerts:
            logger.info(f"[{self.name}] queued alert: {alert}")
        return changed
