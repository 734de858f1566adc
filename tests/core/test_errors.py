import pytest

from sophon.core.errors import (
    DeliveryError,
    ErrorAction,
    FetchError,
    IndexingError,
    StatePersistenceError,
    error_action,
)
from sophon.fetch_data.graph import GraphFetchError
from sophon.fetch_data.ledger import LedgerFetchError


@pytest.mark.parametrize(
    "exc, expected",
    [
        (FetchError("x"), ErrorAction.SKIP_CYCLE),
        (GraphFetchError("x"), ErrorAction.SKIP_CYCLE),
        (LedgerFetchError("x"), ErrorAction.SKIP_CYCLE),
        (IndexingError("x"), ErrorAction.SKIP_CYCLE),
        (StatePersistenceError("x"), ErrorAction.LOG_ONLY),
        (DeliveryError("x"), ErrorAction.LOG_ONLY),
    ],
)
def test_known_errors_are_never_fatal(exc, expected):
    assert error_action(exc) is expected


@pytest.mark.parametrize("exc", [KeyError("x"), ZeroDivisionError(), RuntimeError("bug")])
def test_unknown_errors_are_fatal(exc):
    assert error_action(exc) is ErrorAction.FATAL
