"""Unigram policy: probabilistic edge costs, minimum-cost decoding."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from subword_lattice.algorithms.base import SegmentationPolicy
from subword_lattice.algorithms.registry import PolicyRegistry
from subword_lattice.algorithms.types import Algorithm
from subword_lattice.decoding.viterbi import ViterbiDecoder

if TYPE_CHECKING:
    from subword_lattice.decoding.base import Decoder
    from subword_lattice.vocabulary.scores import ScoreTables
    from subword_lattice.vocabulary.types import VocabularyEntry


@PolicyRegistry.register(Algorithm.UNIGRAM)
class UnigramPolicy(SegmentationPolicy):
    """Edge cost is ``-ln(prob(token))``.

    Tokens missing from the probability table use
    ``config.floor_probability``, giving a large but finite cost. The path
    minimizing summed cost is the most probable segmentation under a
    unigram language model.
    """

    def edge_score(self, entry: VocabularyEntry, substring: str, tables: ScoreTables) -> float:
        return -math.log(tables.probability(entry.token, self._config.floor_probability))

    def build_decoder(self) -> Decoder:
        return ViterbiDecoder()
