"""Text canonicalization applied before lattice construction."""

from __future__ import annotations

import re
import unicodedata

# Combining Diacritical Marks block. Marks of other scripts are kept so that
# e.g. Arabic-script input is not reduced to its bare consonants.
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize(text: str) -> str:
    """Lower-case, decompose, drop accents and trim surrounding whitespace.

    ``normalize(normalize(x)) == normalize(x)`` for every string ``x``.

    Args:
        text: Raw input text.

    Returns:
        The canonical form used as the lattice text.
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed).strip()
