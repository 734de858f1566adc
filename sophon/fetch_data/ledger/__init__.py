from .ledger_client import LEDGER_ABI, LedgerClient, LedgerFetchError
from .models import PLANET_LEVELS, LedgerMetrics

__all__ = ["LEDGER_ABI", "LedgerClient", "LedgerFetchError", "LedgerMetrics", "PLANET_LEVELS"]
