"""Validation runner: compares engine output with gold annotations.

Consumes only the engine's public trace contract (final tokens, selected
edges and frames), never decoder internals.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from subword_lattice.algorithms import Algorithm
from subword_lattice.engine import TokenizerEngine
from subword_lattice.evaluation.detokenize import detokenize
from subword_lattice.evaluation.types import (
    ValidationCase,
    ValidationMetrics,
    ValidationReport,
    ValidationRow,
    ValidationStatus,
)
from subword_lattice.tracing.replay import count_backtracks

if TYPE_CHECKING:
    from subword_lattice.config import LatticeConfig
    from subword_lattice.vocabulary.types import Vocabulary

logger = logging.getLogger("subword_lattice")

_NON_ASCII = re.compile(r"[^\x00-\x7f]")
_WHITESPACE = re.compile(r"\s+")

# (pass_at, needs_work_at, higher_is_better)
_THRESHOLDS: dict[str, tuple[float, float, bool]] = {
    "token_accuracy": (0.9, 0.8, True),
    "boundary_accuracy": (0.9, 0.8, True),
    "normalization_accuracy": (0.9, 0.8, True),
    "round_trip_consistency": (0.9, 0.8, True),
    "unknown_token_rate": (0.02, 0.05, False),
    "avg_backtracks": (5.0, 10.0, False),
}


def is_unknown_token(label: str) -> bool:
    """Whether *label* is an explicit unknown placeholder (``[UNK]``, ``[UNK:x]``)."""
    return label == "[UNK]" or label.startswith("[UNK:")


def status_for_metric(metric: str, value: float) -> ValidationStatus:
    """Map a metric value to Pass / Needs work / Fail."""
    if metric not in _THRESHOLDS:
        return ValidationStatus.NEEDS_WORK
    pass_at, needs_work_at, higher_is_better = _THRESHOLDS[metric]
    if higher_is_better:
        if value >= pass_at:
            return ValidationStatus.PASS
        if value >= needs_work_at:
            return ValidationStatus.NEEDS_WORK
        return ValidationStatus.FAIL
    if value <= pass_at:
        return ValidationStatus.PASS
    if value <= needs_work_at:
        return ValidationStatus.NEEDS_WORK
    return ValidationStatus.FAIL


def gold_boundaries(processed_text: str, gold_tokens: Sequence[str]) -> list[tuple[int, int]]:
    """Locate gold tokens in order in *processed_text*.

    Tokens that cannot be found after the previous match are skipped.
    """
    bounds: list[tuple[int, int]] = []
    cursor = 0
    for token in gold_tokens:
        start = processed_text.find(token, cursor)
        if start == -1:
            continue
        end = start + len(token)
        bounds.append((start, end))
        cursor = end
    return bounds


def _pct(value: float) -> str:
    return f"{math.floor(value * 100 + 0.5)}%"


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _ratio(num: float, den: float) -> float:
    return num / den if den else 0.0


def run_validation(
    cases: Sequence[ValidationCase],
    algorithm: Algorithm | str,
    normalize: bool = True,
    vocabulary: Vocabulary | None = None,
    config: LatticeConfig | None = None,
) -> ValidationReport:
    """Tokenize every case with tracing and aggregate the metrics.

    Args:
        cases: Gold-annotated inputs.
        algorithm: Algorithm member or name.
        normalize: Normalize inputs before tokenization.
        vocabulary: Vocabulary; ``None`` uses the built-in one.
        config: Engine configuration.

    Returns:
        ValidationReport with metrics and display rows.
    """
    member = Algorithm.parse(algorithm)
    engine = TokenizerEngine(config)

    total_gold_tokens = matching_tokens = 0
    total_gold_bounds = matching_bounds = 0
    normalization_correct = 0
    total_tokens = unknown_tokens = 0
    round_trip_correct = 0
    total_backtracks = 0

    for case in cases:
        traced = engine.tokenize_with_trace(case.input, member, normalize, vocabulary)
        result = traced.result
        hyp_tokens = result.tokens

        # Token accuracy: position-wise comparison.
        total_gold_tokens += len(case.gold_tokens)
        matching_tokens += sum(1 for gold, hyp in zip(case.gold_tokens, hyp_tokens) if gold == hyp)

        # Boundary accuracy against the selected edges.
        bounds = gold_boundaries(result.text, case.gold_tokens)
        total_gold_bounds += len(bounds)
        selected = result.selected_edges
        for (start, end), edge in zip(bounds, selected):
            if edge.start == start and edge.end == end:
                matching_bounds += 1

        expected_norm = case.gold_normalized if case.gold_normalized is not None else result.text
        if result.text == expected_norm:
            normalization_correct += 1

        # Non-ASCII tokens are left out so non-Latin scripts do not dominate.
        for token in hyp_tokens:
            if _NON_ASCII.search(token):
                continue
            total_tokens += 1
            if is_unknown_token(token):
                unknown_tokens += 1

        gold_detok = (
            case.gold_detokenized
            if case.gold_detokenized is not None
            else detokenize(case.gold_tokens, engine.config)
        )
        if _collapse(gold_detok) == _collapse(detokenize(hyp_tokens, engine.config)):
            round_trip_correct += 1

        # Greedy decoders commit to one forward choice per node.
        if member is Algorithm.UNIGRAM:
            total_backtracks += count_backtracks(traced.frames)

        logger.debug("Validated case %s: %s", case.case_id, " | ".join(hyp_tokens))

    n_cases = len(cases)
    metrics = ValidationMetrics(
        token_accuracy=_ratio(matching_tokens, total_gold_tokens),
        boundary_accuracy=_ratio(matching_bounds, total_gold_bounds),
        normalization_accuracy=_ratio(normalization_correct, n_cases),
        unknown_token_rate=_ratio(unknown_tokens, total_tokens),
        round_trip_consistency=_ratio(round_trip_correct, n_cases),
        avg_backtracks=_ratio(total_backtracks, n_cases),
    )
    return ValidationReport(metrics=metrics, rows=build_rows(metrics))


def build_rows(metrics: ValidationMetrics) -> tuple[ValidationRow, ...]:
    """Display rows for *metrics*."""
    return (
        ValidationRow(
            "Token Accuracy",
            _pct(metrics.token_accuracy),
            status_for_metric("token_accuracy", metrics.token_accuracy),
            "Token-level comparison against gold tokens",
        ),
        ValidationRow(
            "Boundary Accuracy",
            _pct(metrics.boundary_accuracy),
            status_for_metric("boundary_accuracy", metrics.boundary_accuracy),
            "Character span alignment for tokens",
        ),
        ValidationRow(
            "Normalization Accuracy",
            _pct(metrics.normalization_accuracy),
            status_for_metric("normalization_accuracy", metrics.normalization_accuracy),
        ),
        ValidationRow(
            "Unknown Token Rate",
            f"{metrics.unknown_token_rate * 100:.1f}%",
            status_for_metric("unknown_token_rate", metrics.unknown_token_rate),
            "Share of tokens not present in vocabulary",
        ),
        ValidationRow(
            "Round-trip Consistency",
            _pct(metrics.round_trip_consistency),
            status_for_metric("round_trip_consistency", metrics.round_trip_consistency),
            "Detokenize(tokens) matches gold string",
        ),
        ValidationRow(
            "Lattice Backtracks",
            f"{metrics.avg_backtracks:.1f}",
            status_for_metric("avg_backtracks", metrics.avg_backtracks),
            "Higher values indicate more competing paths",
        ),
    )
