"""Data types for the evaluation harness."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationStatus(str, Enum):
    """Verdict for one metric."""

    PASS = "Pass"
    NEEDS_WORK = "Needs work"
    FAIL = "Fail"


@dataclass(frozen=True, slots=True)
class ValidationCase:
    """One gold-annotated input.

    Attributes:
        case_id: Short identifier.
        input: Raw input text.
        gold_tokens: Expected token sequence.
        gold_normalized: Expected normalized text, if checked.
        gold_detokenized: Expected detokenized string; derived from
            ``gold_tokens`` when omitted.
    """

    case_id: str
    input: str
    gold_tokens: tuple[str, ...]
    gold_normalized: str | None = None
    gold_detokenized: str | None = None


@dataclass(frozen=True, slots=True)
class ValidationMetrics:
    """Aggregate metrics over a set of cases. Rates are in [0, 1]."""

    token_accuracy: float
    boundary_accuracy: float
    normalization_accuracy: float
    unknown_token_rate: float
    round_trip_consistency: float
    avg_backtracks: float


@dataclass(frozen=True, slots=True)
class ValidationRow:
    """Display row for one metric."""

    metric: str
    value: str
    status: ValidationStatus
    notes: str = ""


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Metrics plus their display rows."""

    metrics: ValidationMetrics
    rows: tuple[ValidationRow, ...]
