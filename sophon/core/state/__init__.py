from .alert_queue import AlertQueue
from .monitor_state import HIGH_WATER_FIELDS, MonitorState
from .shared_state import SharedState
from .state_store import StateStore

__all__ = ["AlertQueue", "HIGH_WATER_FIELDS", "MonitorState", "SharedState", "StateStore"]
