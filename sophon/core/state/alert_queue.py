from typing import Optional

from .monitor_state import MonitorState


class AlertQueue:
    """FIFO view over MonitorState.pending_alerts: append at the tail, pop at the head."""

    def __init__(self, state: MonitorState):
        self._state = state

    def __len__(self) -> int:
        return len(self._state.pending_alerts)

    def extend(self, messages: list[str]) -> None:
        self._state.pending_alerts.extend(messages)

    def peek(self) -> Optional[str]:
        if not self._state.pending_alerts:
            return None
        return self._state.pending_alerts[0]

    def pop_head(self) -> str:
        return self._state.pending_alerts.pop(0)
