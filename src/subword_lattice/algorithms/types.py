"""The closed set of segmentation algorithms."""

from __future__ import annotations

from enum import Enum

from subword_lattice.exceptions import UnknownAlgorithmError


class Algorithm(str, Enum):
    """Segmentation algorithm selected once per tokenization call.

    - ``UNIGRAM``: edge cost ``-ln(prob)``, minimum-cost (Viterbi) decoding.
    - ``BPE``: edge cost is the token's rank, greedy longest-match decoding.
    - ``WORDPIECE``: continuation-marked matching, edge score is the span
      length, greedy longest-match decoding.
    """

    UNIGRAM = "unigram"
    BPE = "bpe"
    WORDPIECE = "wordpiece"

    @property
    def display_name(self) -> str:
        """Conventional spelling, e.g. ``"WordPiece"``."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: Algorithm | str) -> Algorithm:
        """Resolve an Algorithm member from itself, its value or its display name.

        Matching is case-insensitive.

        Raises:
            UnknownAlgorithmError: If *value* names no algorithm.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key == member.value:
                return member
        available = ", ".join(member.value for member in cls)
        raise UnknownAlgorithmError(f"Unknown algorithm '{value}'. Available: {available}")


_DISPLAY_NAMES = {
    Algorithm.UNIGRAM: "Unigram",
    Algorithm.BPE: "BPE",
    Algorithm.WORDPIECE: "WordPiece",
}
