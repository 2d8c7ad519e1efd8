"""Data types for vocabularies."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from subword_lattice.exceptions import VocabularyLoadError


@dataclass(frozen=True, slots=True)
class VocabularyEntry:
    """One (token, score) pair.

    Attributes:
        token: Token string as it appears in the vocabulary, including any
            continuation or word-initial marker.
        score: Raw score. Higher means more frequent / more preferred.
    """

    token: str
    score: float


Vocabulary = Sequence[VocabularyEntry]

EntryLike = Union[VocabularyEntry, tuple[str, float], Mapping[str, Any]]


def finite_score(token: str, value: float) -> float:
    """Return *value*, rejecting ``inf`` and ``nan``.

    Raises:
        VocabularyLoadError: If *value* is not finite.
    """
    if not math.isfinite(value):
        raise VocabularyLoadError(f"Non-finite score {value!r} for token {token!r}")
    return value


def as_entry(item: EntryLike) -> VocabularyEntry:
    """Coerce an entry, a ``(token, score)`` pair or a ``{"token", "score"}`` dict.

    Raises:
        VocabularyLoadError: If *item* has none of the supported shapes or
            its score is not finite.
    """
    if isinstance(item, VocabularyEntry):
        return item
    if isinstance(item, Mapping):
        try:
            token, score = str(item["token"]), float(item["score"])
        except (KeyError, TypeError, ValueError) as exc:
            raise VocabularyLoadError(f"Malformed vocabulary entry: {item!r}") from exc
    else:
        try:
            raw_token, raw_score = item
            token, score = str(raw_token), float(raw_score)
        except (TypeError, ValueError) as exc:
            raise VocabularyLoadError(f"Malformed vocabulary entry: {item!r}") from exc
    return VocabularyEntry(token=token, score=finite_score(token, score))


def as_entries(items: Iterable[EntryLike]) -> tuple[VocabularyEntry, ...]:
    """Coerce an iterable of entry-like items, preserving order."""
    return tuple(as_entry(item) for item in items)


def index_vocabulary(vocabulary: Vocabulary) -> Mapping[str, VocabularyEntry]:
    """Map each token to its first entry in *vocabulary*.

    Token uniqueness is assumed but not enforced: later duplicates are
    ignored so that the first match wins.
    """
    index: dict[str, VocabularyEntry] = {}
    for entry in vocabulary:
        index.setdefault(entry.token, entry)
    return MappingProxyType(index)
