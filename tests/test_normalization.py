"""Tests for subword_lattice.normalization."""

from __future__ import annotations

import numpy as np
import pytest

from subword_lattice.normalization import normalize


class TestNormalize:
    """Lower-casing, accent stripping and trimming."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Unhappiness", "unhappiness"),
            ("  Café  ", "cafe"),
            ("NAÏVE", "naive"),
            ("Crème Brûlée", "creme brulee"),
            ("", ""),
            ("   ", ""),
        ],
    )
    def test_examples(self, raw: str, expected: str) -> None:
        assert normalize(raw) == expected

    def test_inner_whitespace_kept(self) -> None:
        assert normalize(" state of  the art ") == "state of  the art"

    def test_non_latin_script_unchanged(self) -> None:
        assert normalize("پاکستان") == "پاکستان"

    def test_precomposed_and_decomposed_agree(self) -> None:
        assert normalize("é") == normalize("é") == "e"

    def test_idempotent(self) -> None:
        rng = np.random.default_rng(7)
        alphabet = list("abcXYZ -éÉüñǺ̈\t")
        for _ in range(200):
            length = int(rng.integers(0, 12))
            text = "".join(rng.choice(alphabet, size=length))
            once = normalize(text)
            assert normalize(once) == once
