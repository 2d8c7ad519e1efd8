"""Lattice construction.

For every start offset ``i`` the builder tests each substring
``text[i:j]`` with ``i < j <= min(i + max_token_length, len(text))``
against the vocabulary, asking the algorithm's policy how to match and
score it. Where nothing matches at ``i``, exactly one single-character
fallback edge ``(i, i + 1, text[i])`` is added with
``config.fallback_penalty`` as its score.

Every offset therefore has an outgoing edge, and since every edge moves
forward at least one character, a complete walk from node 0 to
``len(text)`` always exists.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from subword_lattice.algorithms import PolicyRegistry
from subword_lattice.algorithms.types import Algorithm
from subword_lattice.config import LatticeConfig, default_config
from subword_lattice.lattice.types import Edge, Lattice
from subword_lattice.vocabulary.scores import derive_scores
from subword_lattice.vocabulary.types import index_vocabulary

if TYPE_CHECKING:
    from subword_lattice.algorithms.base import SegmentationPolicy
    from subword_lattice.vocabulary.scores import ScoreTables
    from subword_lattice.vocabulary.types import Vocabulary

logger = logging.getLogger("subword_lattice")


class LatticeBuilder:
    """Stateless lattice builder.

    Holds only the configuration; each ``build()`` call derives its own
    lookup tables, so one builder is safe to share between threads.
    """

    def __init__(self, config: LatticeConfig | None = None) -> None:
        self._config = config if config is not None else default_config()

    @property
    def config(self) -> LatticeConfig:
        """The configuration providing the length bound and fallback penalty."""
        return self._config

    def build(
        self,
        text: str,
        algorithm: Algorithm | str,
        vocabulary: Vocabulary,
        *,
        tables: ScoreTables | None = None,
        policy: SegmentationPolicy | None = None,
    ) -> Lattice:
        """Build the candidate lattice for *text*.

        Args:
            text: Lattice text (already normalized if normalization is wanted).
            algorithm: Algorithm whose policy matches and scores substrings.
            vocabulary: Ordered (token, score) entries.
            tables: Precomputed score tables for *vocabulary*; derived if omitted.
            policy: Prebuilt policy for *algorithm*; built from the registry
                if omitted.

        Returns:
            A fresh Lattice. Empty text gives a single node and no edges.
        """
        member = Algorithm.parse(algorithm)
        if policy is None:
            policy = PolicyRegistry.build(member, self._config)
        if tables is None:
            tables = derive_scores(vocabulary)
        index = index_vocabulary(vocabulary)

        n = len(text)
        max_len = self._config.max_token_length
        edges: list[Edge] = []
        fallback_count = 0

        for i in range(n):
            matched = False
            for j in range(i + 1, min(n, i + max_len) + 1):
                substring = text[i:j]
                entry = policy.match(substring, i, index)
                if entry is None:
                    continue
                matched = True
                edges.append(
                    Edge(
                        start=i,
                        end=j,
                        label=entry.token,
                        score=policy.edge_score(entry, substring, tables),
                    )
                )

            if not matched:
                fallback_count += 1
                edges.append(
                    Edge(
                        start=i,
                        end=i + 1,
                        label=text[i],
                        score=self._config.fallback_penalty,
                        is_fallback=True,
                    )
                )

        if fallback_count:
            logger.debug(
                "Lattice for %d chars used %d fallback edge(s) under %s",
                n,
                fallback_count,
                member.display_name,
            )

        return Lattice(text=text, edges=tuple(edges), algorithm=member)


def build_lattice(
    text: str,
    algorithm: Algorithm | str,
    vocabulary: Vocabulary,
    config: LatticeConfig | None = None,
) -> Lattice:
    """Convenience wrapper around ``LatticeBuilder(config).build(...)``."""
    return LatticeBuilder(config).build(text, algorithm, vocabulary)
