"""subword-lattice: inspectable subword segmentation over a token lattice.

Builds the lattice of every vocabulary match in a string and decodes it
with greedy longest-match (BPE, WordPiece) or minimum-cost Viterbi
(Unigram) selection. Traced calls record every decoding decision as an
immutable inspection frame for step-by-step playback.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("subword-lattice")
except PackageNotFoundError:
    __version__ = "0.0.0"

from subword_lattice.algorithms import Algorithm
from subword_lattice.config import LatticeConfig, resolve_config, validate_overrides
from subword_lattice.engine import (
    TokenizerEngine,
    TokenizerResult,
    TracedResult,
    tokenize,
    tokenize_with_trace,
)
from subword_lattice.evaluation import detokenize
from subword_lattice.exceptions import (
    ConfigValidationError,
    SubwordLatticeError,
    UnknownAlgorithmError,
    VocabularyLoadError,
)
from subword_lattice.lattice import Edge, EdgeId, Lattice, build_lattice
from subword_lattice.normalization import normalize
from subword_lattice.tracing import FrameKind, InspectionFrame
from subword_lattice.vocabulary import DEFAULT_VOCABULARY, VocabularyEntry, derive_scores

__all__ = [
    "DEFAULT_VOCABULARY",
    "Algorithm",
    "ConfigValidationError",
    "Edge",
    "EdgeId",
    "FrameKind",
    "InspectionFrame",
    "Lattice",
    "LatticeConfig",
    "SubwordLatticeError",
    "TokenizerEngine",
    "TokenizerResult",
    "TracedResult",
    "UnknownAlgorithmError",
    "VocabularyEntry",
    "VocabularyLoadError",
    "__version__",
    "build_lattice",
    "derive_scores",
    "detokenize",
    "normalize",
    "resolve_config",
    "tokenize",
    "tokenize_with_trace",
    "validate_overrides",
]
