"""BPE policy: rank edge costs, greedy longest-match decoding.

This is not merge-rule application. A pre-trained BPE vocabulary applied
to a single string is approximated by longest match; the rank is kept on
each edge so the lattice shows which tokens are frequent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from subword_lattice.algorithms.base import SegmentationPolicy
from subword_lattice.algorithms.registry import PolicyRegistry
from subword_lattice.algorithms.types import Algorithm
from subword_lattice.decoding.greedy import GreedyDecoder

if TYPE_CHECKING:
    from subword_lattice.decoding.base import Decoder
    from subword_lattice.vocabulary.scores import ScoreTables
    from subword_lattice.vocabulary.types import VocabularyEntry


@PolicyRegistry.register(Algorithm.BPE)
class BPEPolicy(SegmentationPolicy):
    """Edge score is the token's rank (0 = highest raw score).

    Tokens without a rank get ``config.unknown_rank``.
    """

    def edge_score(self, entry: VocabularyEntry, substring: str, tables: ScoreTables) -> float:
        return float(tables.rank(entry.token, self._config.unknown_rank))

    def build_decoder(self) -> Decoder:
        return GreedyDecoder()
