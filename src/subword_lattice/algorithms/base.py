"""Base class for segmentation policies.

A policy bundles the two algorithm-specific capabilities of the engine:
how a substring is matched and scored while the lattice is built, and
which decoder selects the path through it. Each Algorithm member has
exactly one registered policy.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from subword_lattice.algorithms.types import Algorithm
    from subword_lattice.config import LatticeConfig
    from subword_lattice.decoding.base import Decoder
    from subword_lattice.vocabulary.scores import ScoreTables
    from subword_lattice.vocabulary.types import VocabularyEntry


class SegmentationPolicy(ABC):
    """Abstract base class for the per-algorithm match, cost and decode policy."""

    algorithm: ClassVar[Algorithm]

    def __init__(self, config: LatticeConfig) -> None:
        """Initialize with the fallback constants of the active config.

        Args:
            config: Active configuration for this call.
        """
        self._config = config

    @property
    def config(self) -> LatticeConfig:
        """The configuration this policy was built with."""
        return self._config

    def match(
        self,
        substring: str,
        start: int,
        index: Mapping[str, VocabularyEntry],
    ) -> VocabularyEntry | None:
        """Return the vocabulary entry matching *substring* at offset *start*.

        The default is an exact lookup.

        Args:
            substring: Candidate span of the lattice text.
            start: Offset of the span's first character.
            index: First-occurrence token index of the vocabulary.

        Returns:
            The matching entry, or ``None``.
        """
        return index.get(substring)

    @abstractmethod
    def edge_score(self, entry: VocabularyEntry, substring: str, tables: ScoreTables) -> float:
        """Score of the lattice edge created for a matched entry.

        Args:
            entry: The matched vocabulary entry.
            substring: The span of lattice text it covers.
            tables: Derived probability and rank tables.

        Returns:
            Edge score; its meaning depends on the algorithm.
        """

    @abstractmethod
    def build_decoder(self) -> Decoder:
        """Return the decoder that selects a path for this algorithm."""
