"""
JSON file store for MonitorState.

load() never fails: a missing, unreadable or invalid file means "start
fresh". save() writes atomically and raises StatePersistenceError so the
caller can decide to log it and keep the in-memory state.
"""
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from ..errors import StatePersistenceError
from .monitor_state import MonitorState

logger = logging.getLogger(__name__)


class StateStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> MonitorState:
        if not self.path.exists():
            logger.info(f"No state file at {self.path}, starting fresh")
            return MonitorState()

        try:
            raw = self.path.read_text(encoding="utf-8")
            state = MonitorState.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Unreadable state file {self.path}, starting fresh: {e}")
            return MonitorState()

        logger.info(
            f"Loaded state from {self.path}: {state.high_water_marks()}, "
            f"pending_alerts={len(state.pending_alerts)}"
        )
        return state

    def save(self, state: MonitorState) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(state.model_dump_json(indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StatePersistenceError(f"failed to write state to {self.path}: {e}") from e
