from .thresholds import (
    Evaluation,
    apply_evaluation,
    evaluate_event_snapshot,
    evaluate_ledger_metrics,
    milestone,
)

__all__ = [
    "Evaluation",
    "apply_evaluation",
    "evaluate_event_snapshot",
    "evaluate_ledger_metrics",
    "milestone",
]
