"""Diagnostic logger for tokenization calls.

Uses the standard ``logging`` module with the ``"subword_lattice"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from subword_lattice.config import LatticeConfig
    from subword_lattice.logging.types import TokenizationRecord

logger = logging.getLogger("subword_lattice")


class TokenizationLogger:
    """Per-call diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per call with algorithm, lattice size,
        token count, path cost and timing.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis
    via ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: LatticeConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[TokenizationRecord] = []

    def log_call(self, record: TokenizationRecord) -> None:
        """Log a single tokenization call.

        Args:
            record: Immutable record of the call.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "algorithm=%s chars=%d edges=%d fallback=%d tokens=%d cost=%.4f "
                "frames=%d updates=%d%s total=%.2fms",
                record.algorithm,
                record.text_length,
                record.edge_count,
                record.fallback_edge_count,
                record.token_count,
                record.path_cost,
                record.frame_count,
                record.update_count,
                "" if record.complete else " [PARTIAL]",
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("tokenization_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[TokenizationRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all TokenizationRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        token_counts = [r.token_count for r in self._records]
        edge_counts = [r.edge_count for r in self._records]
        fallback_counts = [r.fallback_edge_count for r in self._records]
        elapsed = [r.elapsed_ms for r in self._records]
        partial_count = sum(1 for r in self._records if not r.complete)

        return {
            "total_calls": n,
            "mean_tokens": sum(token_counts) / n,
            "mean_edges": sum(edge_counts) / n,
            "total_fallback_edges": sum(fallback_counts),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
            "partial_count": partial_count,
            "partial_rate": partial_count / n,
        }
