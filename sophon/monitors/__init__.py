"""
Monitors package - periodic tasks sharing one MonitorState.

- periodic: generic loop and the fetch-evaluate-apply polling cycle
- pollers: event and ledger poller configurations
- delivery_pump: alert queue drain
- counts_monitor: planet totals report
- main_monitor: task wiring and shutdown race
"""
from .counts_monitor import CountsReporter
from .delivery_pump import AlertChannel, DeliveryPump
from .main_monitor import build_tasks, run_monitor, run_tasks
from .periodic import Periodic, PollingTask
from .pollers import build_event_poller, build_ledger_poller

__all__ = [
    "AlertChannel",
    "CountsReporter",
    "DeliveryPump",
    "Periodic",
    "PollingTask",
    "build_event_poller",
    "build_ledger_poller",
    "build_tasks",
    "run_monitor",
    "run_tasks",
]
