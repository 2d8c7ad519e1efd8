"""Vocabulary ingestion from local JSON files.

Supported shapes:

- a list of ``{"token": ..., "score": ...}`` objects,
- an object wrapping such a list under ``"vocab"``,
- a flat ``{token: score}`` mapping.

Hugging Face ``vocab.json`` files map tokens to ids instead of scores; use
:func:`load_id_vocabulary`, which scores each token ``max(0, 10000 - id)``
so that low ids (frequent tokens) rank first.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from subword_lattice.exceptions import VocabularyLoadError
from subword_lattice.vocabulary.defaults import COMMON_AFFIXES
from subword_lattice.vocabulary.types import VocabularyEntry, as_entries, finite_score

logger = logging.getLogger("subword_lattice")

_ID_SCORE_CEILING = 10000


def _read_json(path: str | Path) -> Any:
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise VocabularyLoadError(f"Cannot read vocabulary file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise VocabularyLoadError(f"Vocabulary file {path} is not valid JSON: {exc}") from exc


def _finalize(entries: Iterable[VocabularyEntry], limit: int | None) -> list[VocabularyEntry]:
    """Drop empty tokens, sort by descending score (stable) and truncate."""
    kept = [entry for entry in entries if entry.token]
    kept.sort(key=lambda entry: -entry.score)
    if limit is not None:
        kept = kept[:limit]
    return kept


def parse_vocabulary(data: Any, *, limit: int | None = None) -> list[VocabularyEntry]:
    """Convert decoded JSON into vocabulary entries.

    Args:
        data: Decoded JSON in one of the supported shapes.
        limit: Keep only the *limit* highest-scored entries.

    Returns:
        Entries sorted by descending score.

    Raises:
        VocabularyLoadError: If *data* has an unsupported shape or a
            non-finite (``NaN``, ``Infinity``) score.
    """
    if isinstance(data, dict) and isinstance(data.get("vocab"), list):
        data = data["vocab"]

    if isinstance(data, list):
        entries = as_entries(data)
    elif isinstance(data, dict):
        # Non-numeric scores fall back to 1.
        entries = tuple(
            VocabularyEntry(
                token=str(token),
                score=finite_score(str(token), float(score))
                if isinstance(score, (int, float))
                else 1.0,
            )
            for token, score in data.items()
        )
    else:
        raise VocabularyLoadError(f"Unsupported vocabulary JSON type: {type(data).__name__}")

    return _finalize(entries, limit)


def load_vocabulary(path: str | Path, *, limit: int | None = None) -> list[VocabularyEntry]:
    """Load a (token, score) vocabulary from a JSON file.

    Args:
        path: Path to the JSON file.
        limit: Keep only the *limit* highest-scored entries.

    Returns:
        Entries sorted by descending score.

    Raises:
        VocabularyLoadError: If the file is unreadable or malformed.
    """
    entries = parse_vocabulary(_read_json(path), limit=limit)
    logger.info("Loaded %d vocabulary entries from %s", len(entries), path)
    return entries


def load_id_vocabulary(path: str | Path) -> list[VocabularyEntry]:
    """Load a Hugging Face style ``{token: id}`` vocabulary.

    Args:
        path: Path to a ``vocab.json`` file.

    Returns:
        Entries scored ``max(0, 10000 - id)``, sorted by descending score.

    Raises:
        VocabularyLoadError: If the file is unreadable or not a JSON object.
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise VocabularyLoadError(
            f"Expected a token -> id object in {path}, got {type(data).__name__}"
        )
    entries = [
        VocabularyEntry(
            token=str(token),
            score=float(max(0, _ID_SCORE_CEILING - (token_id if isinstance(token_id, int) else 0))),
        )
        for token, token_id in data.items()
    ]
    result = _finalize(entries, None)
    logger.info("Loaded %d id-scored vocabulary entries from %s", len(result), path)
    return result


def augment_with_affixes(vocabulary: Iterable[VocabularyEntry]) -> list[VocabularyEntry]:
    """Add common affixes missing from *vocabulary*, then sort by score.

    Args:
        vocabulary: Base entries.

    Returns:
        A new list; existing tokens keep their original score.
    """
    augmented = list(vocabulary)
    present = {entry.token for entry in augmented}
    augmented.extend(affix for affix in COMMON_AFFIXES if affix.token not in present)
    augmented.sort(key=lambda entry: -entry.score)
    return augmented
