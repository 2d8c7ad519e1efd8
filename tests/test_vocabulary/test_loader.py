"""Tests for vocabulary coercion and JSON ingestion."""

from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from subword_lattice.exceptions import VocabularyLoadError
from subword_lattice.vocabulary import (
    COMMON_AFFIXES,
    VocabularyEntry,
    as_entry,
    augment_with_affixes,
    index_vocabulary,
    load_id_vocabulary,
    load_vocabulary,
    parse_vocabulary,
)


def _write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestAsEntry:
    def test_entry_passthrough(self) -> None:
        entry = VocabularyEntry("a", 1.0)
        assert as_entry(entry) is entry

    def test_tuple(self) -> None:
        assert as_entry(("un", 3)) == VocabularyEntry("un", 3.0)

    def test_mapping(self) -> None:
        assert as_entry({"token": "ing", "score": "4"}) == VocabularyEntry("ing", 4.0)

    def test_mapping_missing_score(self) -> None:
        with pytest.raises(VocabularyLoadError):
            as_entry({"token": "x"})

    def test_wrong_arity(self) -> None:
        with pytest.raises(VocabularyLoadError):
            as_entry(("a", 1, 2))  # type: ignore[arg-type]

    def test_non_numeric_score(self) -> None:
        with pytest.raises(VocabularyLoadError):
            as_entry(("a", "high"))  # type: ignore[arg-type]

    @pytest.mark.parametrize("score", [math.inf, -math.inf, math.nan, "nan", "Infinity"])
    def test_non_finite_score_rejected(self, score: object) -> None:
        with pytest.raises(VocabularyLoadError, match="Non-finite"):
            as_entry(("a", score))  # type: ignore[arg-type]

    def test_non_finite_mapping_score_rejected(self) -> None:
        with pytest.raises(VocabularyLoadError, match="Non-finite"):
            as_entry({"token": "a", "score": math.inf})


class TestIndexVocabulary:
    def test_first_occurrence_wins(self) -> None:
        vocab = [VocabularyEntry("a", 1.0), VocabularyEntry("a", 5.0)]
        assert index_vocabulary(vocab)["a"].score == 1.0

    def test_read_only(self) -> None:
        index = index_vocabulary([VocabularyEntry("a", 1.0)])
        with pytest.raises(TypeError):
            index["b"] = VocabularyEntry("b", 2.0)  # type: ignore[index]


class TestParseVocabulary:
    def test_list_of_objects(self) -> None:
        entries = parse_vocabulary([{"token": "a", "score": 1}, {"token": "b", "score": 3}])
        assert [e.token for e in entries] == ["b", "a"]

    def test_wrapped_list(self) -> None:
        entries = parse_vocabulary({"vocab": [{"token": "a", "score": 2}]})
        assert entries == [VocabularyEntry("a", 2.0)]

    def test_flat_mapping(self) -> None:
        entries = parse_vocabulary({"low": 1, "high": 7, "odd": "n/a"})
        assert [(e.token, e.score) for e in entries] == [("high", 7.0), ("low", 1.0), ("odd", 1.0)]

    def test_empty_tokens_dropped(self) -> None:
        entries = parse_vocabulary([{"token": "", "score": 9}, {"token": "a", "score": 1}])
        assert [e.token for e in entries] == ["a"]

    def test_stable_for_equal_scores(self) -> None:
        entries = parse_vocabulary({"x": 1, "y": 1, "z": 1})
        assert [e.token for e in entries] == ["x", "y", "z"]

    def test_limit(self) -> None:
        entries = parse_vocabulary({"a": 1, "b": 2, "c": 3}, limit=2)
        assert [e.token for e in entries] == ["c", "b"]

    def test_unsupported_type(self) -> None:
        with pytest.raises(VocabularyLoadError, match="Unsupported"):
            parse_vocabulary("not a vocabulary")

    @pytest.mark.parametrize("score", [math.inf, -math.inf, math.nan])
    def test_flat_mapping_non_finite_rejected(self, score: float) -> None:
        with pytest.raises(VocabularyLoadError, match="Non-finite"):
            parse_vocabulary({"a": score, "b": 1})


class TestLoadVocabulary:
    def test_load_from_file(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "vocab.json", [{"token": "un", "score": 3}])
        assert load_vocabulary(path) == [VocabularyEntry("un", 3.0)]

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "vocab.json", {"a": 1})
        assert load_vocabulary(str(path)) == [VocabularyEntry("a", 1.0)]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(VocabularyLoadError, match="Cannot read"):
            load_vocabulary(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(VocabularyLoadError, match="not valid JSON"):
            load_vocabulary(path)

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_json_non_finite_literals_rejected(self, tmp_path: Path, literal: str) -> None:
        path = tmp_path / "vocab.json"
        path.write_text(f'{{"a": {literal}, "b": 1}}', encoding="utf-8")
        with pytest.raises(VocabularyLoadError, match="Non-finite"):
            load_vocabulary(path)


class TestLoadIdVocabulary:
    def test_scores_from_ids(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "vocab.json", {"the": 0, "Ġrun": 42, "rare": 20000})
        entries = load_id_vocabulary(path)
        assert [(e.token, e.score) for e in entries] == [
            ("the", 10000.0),
            ("Ġrun", 9958.0),
            ("rare", 0.0),
        ]

    def test_rejects_list(self, tmp_path: Path) -> None:
        path = _write_json(tmp_path / "vocab.json", ["a", "b"])
        with pytest.raises(VocabularyLoadError, match="token -> id"):
            load_id_vocabulary(path)


class TestAugmentWithAffixes:
    def test_adds_missing_affixes(self) -> None:
        augmented = augment_with_affixes([VocabularyEntry("cat", 5.0)])
        tokens = {e.token for e in augmented}
        assert {a.token for a in COMMON_AFFIXES} <= tokens
        assert "cat" in tokens

    def test_existing_score_kept(self) -> None:
        augmented = augment_with_affixes([VocabularyEntry("##ing", 1.0)])
        matches = [e for e in augmented if e.token == "##ing"]
        assert matches == [VocabularyEntry("##ing", 1.0)]

    def test_sorted_by_score(self) -> None:
        augmented = augment_with_affixes([VocabularyEntry("cat", 100.0)])
        scores = [e.score for e in augmented]
        assert scores == sorted(scores, reverse=True)
        assert augmented[0].token == "cat"
