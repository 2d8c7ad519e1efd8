"""Segmentation algorithm subsystem for subword-lattice.

Each Algorithm member has one policy that decides how substrings are
matched and scored and which decoder selects the path.
"""

from subword_lattice.algorithms.base import SegmentationPolicy
from subword_lattice.algorithms.bpe import BPEPolicy
from subword_lattice.algorithms.registry import PolicyRegistry
from subword_lattice.algorithms.types import Algorithm
from subword_lattice.algorithms.unigram import UnigramPolicy
from subword_lattice.algorithms.wordpiece import WordPiecePolicy

__all__ = [
    "Algorithm",
    "BPEPolicy",
    "PolicyRegistry",
    "SegmentationPolicy",
    "UnigramPolicy",
    "WordPiecePolicy",
]
