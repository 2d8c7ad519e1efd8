"""A small curated set of validation cases.

Gold boundaries are not stored: they are located in the processed text at
evaluation time so they follow the normalization setting.
"""

from __future__ import annotations

from subword_lattice.evaluation.types import ValidationCase

DEFAULT_CASES: tuple[ValidationCase, ...] = (
    ValidationCase("contraction-1", "Don't", ("don", "'t")),
    ValidationCase("hyphen-1", "state-of-the-art", ("state", "-", "of", "-", "the", "-", "art")),
    ValidationCase("simple-1", "running", ("running",)),
    ValidationCase("norm-1", "Internationalization", ("international", "ization")),
    # Non-Latin script kept as a single token.
    ValidationCase("urdu-1", "پاکستان", ("پاکستان",)),
)
