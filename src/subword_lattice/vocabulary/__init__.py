"""Vocabulary subsystem for subword-lattice.

Holds the (token, score) entry type, the built-in demonstration vocabulary,
JSON ingestion, and the derivation of probability and rank tables.
"""

from subword_lattice.vocabulary.defaults import COMMON_AFFIXES, DEFAULT_VOCABULARY
from subword_lattice.vocabulary.loader import (
    augment_with_affixes,
    load_id_vocabulary,
    load_vocabulary,
    parse_vocabulary,
)
from subword_lattice.vocabulary.scores import ScoreTables, derive_scores, stable_softmax
from subword_lattice.vocabulary.types import (
    Vocabulary,
    VocabularyEntry,
    as_entries,
    as_entry,
    finite_score,
    index_vocabulary,
)

__all__ = [
    "COMMON_AFFIXES",
    "DEFAULT_VOCABULARY",
    "ScoreTables",
    "Vocabulary",
    "VocabularyEntry",
    "as_entries",
    "as_entry",
    "augment_with_affixes",
    "derive_scores",
    "finite_score",
    "index_vocabulary",
    "load_id_vocabulary",
    "load_vocabulary",
    "parse_vocabulary",
    "stable_softmax",
]
