"""Shared pytest fixtures for subword-lattice tests.

Provides isolated configuration objects and small hand-checked
vocabularies used across multiple test modules.
"""

from __future__ import annotations

import pytest

from subword_lattice.config import LatticeConfig
from subword_lattice.vocabulary import VocabularyEntry, as_entries


@pytest.fixture
def default_config() -> LatticeConfig:
    """Return a LatticeConfig with field defaults, isolated from .env files."""
    return LatticeConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> LatticeConfig:
    """Return a config with no logging for noise-free tests."""
    return LatticeConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> LatticeConfig:
    """Return a config that keeps every tokenization record in memory."""
    return LatticeConfig(
        _env_file=None,
        log_level="none",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def unhappiness_vocab() -> tuple[VocabularyEntry, ...]:
    """Vocabulary whose best Unigram split of 'unhappiness' is un|happi|ness.

    Single characters are cheap enough to keep every offset covered but far
    more expensive than the three whole morphemes.
    """
    return as_entries(
        [
            ("un", 3),
            ("happi", 3),
            ("ness", 3),
            ("u", 0.5),
            ("n", 0.5),
            ("h", 0.5),
            ("a", 0.5),
            ("p", 0.5),
            ("i", 0.5),
            ("e", 0.5),
            ("s", 0.5),
        ]
    )


@pytest.fixture
def greedy_trap_vocab() -> tuple[VocabularyEntry, ...]:
    """Vocabulary where longest-match and minimum-cost disagree on 'abc'.

    Greedy takes 'ab' and is left with 'c'; the cheapest path is a|bc.
    """
    return as_entries(
        [
            ("bc", 10),
            ("a", 9),
            ("ab", 1),
            ("c", 1),
        ]
    )
