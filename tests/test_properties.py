"""Property checks over a seeded random corpus.

Each check draws random vocabularies and texts over a tiny alphabet so that
lattices are dense and every root-to-sink path can be enumerated.

Covers:
- Coverage: selected edges tile [0, len(text)) exactly
- Fallback guarantee: a complete path exists for any vocabulary
- Minimum-cost optimality against brute-force path enumeration
- Greedy locality: each chosen edge has the longest span at its node
- Trace fidelity: frames replay to the untraced tokens
- Determinism
"""

from __future__ import annotations

import numpy as np
import pytest

from subword_lattice.algorithms import Algorithm
from subword_lattice.config import LatticeConfig
from subword_lattice.engine import TokenizerEngine
from subword_lattice.tracing import FrameKind, replay_tokens
from subword_lattice.vocabulary import VocabularyEntry

_ALPHABET = np.array(list("abcd"))
_N_TRIALS = 60


def _random_text(rng: np.random.Generator, max_len: int = 8) -> str:
    length = int(rng.integers(0, max_len + 1))
    return "".join(rng.choice(_ALPHABET, size=length))


def _random_vocab(rng: np.random.Generator) -> list[VocabularyEntry]:
    size = int(rng.integers(0, 12))
    vocab = []
    for _ in range(size):
        token = "".join(rng.choice(_ALPHABET[:3], size=int(rng.integers(1, 4))))
        if rng.random() < 0.25:
            token = "##" + token
        vocab.append(VocabularyEntry(token, float(rng.uniform(-2.0, 6.0))))
    return vocab


def _corpus(seed: int) -> list[tuple[str, list[VocabularyEntry]]]:
    rng = np.random.default_rng(seed)
    return [(_random_text(rng), _random_vocab(rng)) for _ in range(_N_TRIALS)]


@pytest.fixture
def engine(silent_config: LatticeConfig) -> TokenizerEngine:
    return TokenizerEngine(silent_config)


@pytest.mark.parametrize("algorithm", list(Algorithm))
class TestSegmentationProperties:
    def test_coverage_and_fallback_guarantee(
        self, engine: TokenizerEngine, algorithm: Algorithm
    ) -> None:
        for text, vocab in _corpus(11):
            result = engine.tokenize(text, algorithm, normalize=False, vocabulary=vocab)
            assert result.complete
            cursor = 0
            for start, end, _ in result.selected_path:
                assert start == cursor
                assert end > start
                cursor = end
            assert cursor == len(text)

    def test_trace_fidelity(self, engine: TokenizerEngine, algorithm: Algorithm) -> None:
        for text, vocab in _corpus(23):
            plain = engine.tokenize(text, algorithm, normalize=False, vocabulary=vocab)
            traced = engine.tokenize_with_trace(text, algorithm, normalize=False, vocabulary=vocab)
            assert replay_tokens(traced.frames) == list(plain.tokens)
            assert traced.result.selected_path == plain.selected_path
            assert [f.index for f in traced.frames] == list(range(len(traced.frames)))

    def test_deterministic(self, engine: TokenizerEngine, algorithm: Algorithm) -> None:
        for text, vocab in _corpus(37):
            first = engine.tokenize(text, algorithm, normalize=False, vocabulary=vocab)
            second = engine.tokenize(text, algorithm, normalize=False, vocabulary=vocab)
            assert first.lattice.edges == second.lattice.edges
            assert first.selected_path == second.selected_path
            assert first.cost == second.cost


class TestMinimumCostOptimality:
    def test_no_cheaper_path_exists(self, engine: TokenizerEngine) -> None:
        for text, vocab in _corpus(41):
            result = engine.tokenize(text, Algorithm.UNIGRAM, normalize=False, vocabulary=vocab)
            lattice = result.lattice
            assert result.cost == pytest.approx(lattice.path_cost(result.selected_path))
            for path in lattice.enumerate_paths():
                assert result.cost <= lattice.path_cost(path) + 1e-9


@pytest.mark.parametrize("algorithm", [Algorithm.BPE, Algorithm.WORDPIECE])
class TestGreedyLocality:
    def test_longest_span_at_every_step(
        self, engine: TokenizerEngine, algorithm: Algorithm
    ) -> None:
        for text, vocab in _corpus(53):
            result = engine.tokenize(text, algorithm, normalize=False, vocabulary=vocab)
            lattice = result.lattice
            for edge in result.selected_edges:
                longest = max(e.span for e in lattice.outgoing(edge.start))
                assert edge.span == longest
                # First of the longest in lattice order.
                first = next(e for e in lattice.outgoing(edge.start) if e.span == longest)
                assert first.id == edge.id

    def test_choose_frames_pick_from_candidates(
        self, engine: TokenizerEngine, algorithm: Algorithm
    ) -> None:
        for text, vocab in _corpus(59):
            traced = engine.tokenize_with_trace(text, algorithm, normalize=False, vocabulary=vocab)
            for frame in traced.frames:
                if frame.kind is FrameKind.CHOOSE:
                    assert frame.chosen in frame.candidates
                    assert frame.partial_path[-1] == frame.chosen
