"""
Lock-guarded owner of the single MonitorState.

Every periodic task receives the same SharedState at construction and only
reads or mutates the state inside ``async with shared.lock``. Mutations mark
the state dirty; flush() writes it once per mutation window.
"""
import asyncio
import logging

from ..errors import StatePersistenceError, error_action
from .alert_queue import AlertQueue
from .monitor_state import MonitorState
from .state_store import StateStore

logger = logging.getLogger(__name__)


class SharedState:
    def __init__(self, state: MonitorState, store: StateStore):
        self.state = state
        self.store = store
        self.queue = AlertQueue(state)
        self.lock = asyncio.Lock()
        self._dirty = False

    @classmethod
    def from_store(cls, store: StateStore) -> "SharedState":
        return cls(store.load(), store)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def mark_dirty(self) -> None:
        self._dirty = True

    def flush(self) -> bool:
        """
        Persist the state if it changed. Caller must hold the lock.

        A failed write is logged and swallowed; the state stays dirty so the
        next flush tries again.
        """
        if not self._dirty:
            return False

        try:
            self.store.save(self.state)
        except StatePersistenceError as e:
            logger.error(f"State not persisted ({error_action(e).value}): {e}")
            return False

        self._dirty = False
        return True
