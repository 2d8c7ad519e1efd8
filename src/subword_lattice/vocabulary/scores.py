"""Score derivation: probability and rank views of a vocabulary.

Two parallel lookup tables are derived from the raw scores:

- **probabilities**: softmax over all raw scores, used as per-edge success
  probability by the cost-minimizing (Unigram) policy.
- **ranks**: zero-based position after a stable sort by descending raw
  score, used as the edge cost by the rank-greedy (BPE) policy.

Tables are rebuilt from whatever vocabulary is passed in and are never
shared as mutable module state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import numpy as np

from subword_lattice.vocabulary.types import Vocabulary


@dataclass(frozen=True, slots=True)
class ScoreTables:
    """Immutable probability and rank tables for one vocabulary.

    Attributes:
        probabilities: token -> softmax probability of its raw score.
        ranks: token -> zero-based rank (0 = highest raw score).
    """

    probabilities: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    ranks: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    def probability(self, token: str, floor: float) -> float:
        """Return the probability of *token*, or *floor* if it has none."""
        prob = self.probabilities.get(token)
        if prob is None or not 0.0 < prob <= 1.0:
            return floor
        return prob

    def rank(self, token: str, sentinel: int) -> int:
        """Return the rank of *token*, or *sentinel* if it has none."""
        return self.ranks.get(token, sentinel)

    def __len__(self) -> int:
        return len(self.ranks)


def stable_softmax(scores: np.ndarray) -> np.ndarray:
    """Numerically stable softmax via shift-by-max.

    Vocabularies scored by token id (e.g. ``10000 - id``) would overflow
    ``exp`` without the shift.

    Args:
        scores: 1-D array of raw scores (non-empty).

    Returns:
        Probability array of the same shape, summing to 1.0.
    """
    shifted = scores - np.max(scores)
    exp_shifted = np.exp(shifted)
    result: np.ndarray = exp_shifted / np.sum(exp_shifted)
    return result


def derive_scores(vocabulary: Vocabulary) -> ScoreTables:
    """Derive probability and rank tables from raw vocabulary scores.

    Duplicate tokens keep the values of their first entry; every entry
    still contributes to the softmax denominator and occupies a rank slot.
    Non-finite scores (``inf``, ``nan``) are left out of the softmax and get
    probability 0, so the Unigram policy treats them as unknown tokens.

    Args:
        vocabulary: Ordered (token, score) entries.

    Returns:
        ScoreTables; both tables are empty for an empty vocabulary.
    """
    if not vocabulary:
        return ScoreTables()

    raw = np.fromiter(
        (entry.score for entry in vocabulary), dtype=np.float64, count=len(vocabulary)
    )
    finite = np.isfinite(raw)
    probs = np.zeros_like(raw)
    if finite.any():
        probs[finite] = stable_softmax(raw[finite])

    probabilities: dict[str, float] = {}
    for entry, prob in zip(vocabulary, probs):
        probabilities.setdefault(entry.token, float(prob))

    # Stable sort keeps vocabulary order among equal scores.
    order = np.argsort(-raw, kind="stable")
    positions = np.empty(len(order), dtype=np.int64)
    positions[order] = np.arange(len(order))
    ranks: dict[str, int] = {}
    for entry, position in zip(vocabulary, positions):
        ranks.setdefault(entry.token, int(position))

    return ScoreTables(
        probabilities=MappingProxyType(probabilities),
        ranks=MappingProxyType(ranks),
    )
