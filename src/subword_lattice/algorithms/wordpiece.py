"""WordPiece policy: continuation-marked matching, greedy longest-match decoding."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from subword_lattice.algorithms.base import SegmentationPolicy
from subword_lattice.algorithms.registry import PolicyRegistry
from subword_lattice.algorithms.types import Algorithm
from subword_lattice.decoding.greedy import GreedyDecoder

if TYPE_CHECKING:
    from subword_lattice.decoding.base import Decoder
    from subword_lattice.vocabulary.scores import ScoreTables
    from subword_lattice.vocabulary.types import VocabularyEntry


@PolicyRegistry.register(Algorithm.WORDPIECE)
class WordPiecePolicy(SegmentationPolicy):
    """Away from the start of the text, ``##substring`` beats ``substring``.

    The edge score is the span length. It is only a display heuristic: the
    greedy decoder compares spans directly and never reads the score.
    """

    def match(
        self,
        substring: str,
        start: int,
        index: Mapping[str, VocabularyEntry],
    ) -> VocabularyEntry | None:
        if start > 0:
            continuation = index.get(self._config.continuation_marker + substring)
            if continuation is not None:
                return continuation
        return index.get(substring)

    def edge_score(self, entry: VocabularyEntry, substring: str, tables: ScoreTables) -> float:
        return float(len(substring))

    def build_decoder(self) -> Decoder:
        return GreedyDecoder()
