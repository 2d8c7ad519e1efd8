"""Built-in demonstration vocabulary.

A small set of common English subwords, enough to show splits like
``un|happ|y`` or ``tokeniz|er``. Used when a caller passes no vocabulary.
"""

from __future__ import annotations

from subword_lattice.vocabulary.types import VocabularyEntry, as_entries

DEFAULT_VOCABULARY: tuple[VocabularyEntry, ...] = as_entries(
    [
        # Common starts
        ("t", 1),
        ("th", 2),
        ("the", 5),
        ("a", 1),
        ("an", 2),
        ("un", 3),
        ("in", 2),
        ("inter", 4),
        ("run", 3),
        ("running", 6),
        # Middles / ends
        ("at", 1),
        ("tre", 2),
        ("re", 1),
        ("r", 0.5),
        ("ing", 4),
        ("n", 0.5),
        ("i", 0.5),
        ("tion", 5),
        ("national", 6),
        ("ali", 3),
        ("zation", 5),
        ("is", 2),
        ("on", 1),
        ("count", 4),
        ("er", 2),
        ("intui", 4),
        ("tive", 4),
        ("happ", 3),
        ("y", 1),
        ("ness", 3),
        ("est", 2),
        ("low", 3),
        ("new", 3),
        ("neural", 5),
        ("net", 3),
        ("work", 3),
        ("works", 4),
        ("token", 5),
        ("tokeni", 4),
        ("tokeniz", 5),
        ("tokenize", 6),
        ("tokenizer", 7),
        ("ize", 3),
        ("izer", 4),
        # WordPiece continuations
        ("##ing", 4),
        ("##tion", 5),
        ("##er", 2),
        ("##ness", 3),
        ("##y", 1),
        ("##s", 1),
    ]
)

# Affixes merged in by augment_with_affixes() when missing from a vocabulary.
COMMON_AFFIXES: tuple[VocabularyEntry, ...] = as_entries(
    [
        ("##ing", 50),
        ("##er", 45),
        ("##ed", 40),
        ("##ly", 35),
        ("##tion", 50),
        ("##ness", 40),
        ("un", 35),
        ("re", 30),
        ("in", 25),
        ("dis", 25),
    ]
)
