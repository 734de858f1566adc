"""
Error taxonomy and the policy table that decides what each error kind does
to a periodic cycle.

Actions:
- SKIP_CYCLE: abandon the cycle without touching state, retry next interval
- LOG_ONLY: log and carry on, state stays as it is in memory
- FATAL: let the error propagate and end the process

Nothing raised by the collaborators maps to FATAL; it is reserved for errors
that are not in the table at all.
"""
from enum import Enum


class SophonError(Exception):
    """Base class for every expected error raised by sophon."""


class FetchError(SophonError):
    """A snapshot source could not be reached or returned garbage."""


class IndexingError(FetchError):
    """The event source reports that its index is behind or inconsistent."""


class StatePersistenceError(SophonError):
    """Monitor state could not be written to disk."""


class DeliveryError(SophonError):
    """The transport refused or failed to deliver a message."""


class ErrorAction(str, Enum):
    SKIP_CYCLE = "skip_cycle"
    LOG_ONLY = "log_only"
    FATAL = "fatal"


# IndexingError is listed before its parent so lookups stay explicit
ERROR_POLICY: dict[type[BaseException], ErrorAction] = {
    IndexingError: ErrorAction.SKIP_CYCLE,
    FetchError: ErrorAction.SKIP_CYCLE,
    StatePersistenceError: ErrorAction.LOG_ONLY,
    DeliveryError: ErrorAction.LOG_ONLY,
}


def error_action(exc: BaseException) -> ErrorAction:
    for error_type, action in ERROR_POLICY.items():
        if isinstance(exc, error_type):
            return action
    return ErrorAction.FATAL
