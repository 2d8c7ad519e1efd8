"""Decoding subsystem for subword-lattice.

Greedy longest-match and minimum-cost (Viterbi) path selection over a
lattice, with decisions reported to an injectable frame sink.
"""

from subword_lattice.decoding.base import Decoder, DecodeResult
from subword_lattice.decoding.greedy import GreedyDecoder, longest_edge
from subword_lattice.decoding.viterbi import ViterbiDecoder

__all__ = [
    "DecodeResult",
    "Decoder",
    "GreedyDecoder",
    "ViterbiDecoder",
    "longest_edge",
]
