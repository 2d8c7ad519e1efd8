"""Evaluation harness for subword-lattice.

Scores engine output against gold tokenizations: token and boundary
accuracy, normalization, unknown-token rate, round-trip consistency and
the number of cost-improving lattice updates.
"""

from subword_lattice.evaluation.cases import DEFAULT_CASES
from subword_lattice.evaluation.detokenize import detokenize
from subword_lattice.evaluation.runner import (
    build_rows,
    gold_boundaries,
    is_unknown_token,
    run_validation,
    status_for_metric,
)
from subword_lattice.evaluation.types import (
    ValidationCase,
    ValidationMetrics,
    ValidationReport,
    ValidationRow,
    ValidationStatus,
)

__all__ = [
    "DEFAULT_CASES",
    "ValidationCase",
    "ValidationMetrics",
    "ValidationReport",
    "ValidationRow",
    "ValidationStatus",
    "build_rows",
    "detokenize",
    "gold_boundaries",
    "is_unknown_token",
    "run_validation",
    "status_for_metric",
]
