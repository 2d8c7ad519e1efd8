"""Tests for the subword-lattice command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from subword_lattice import cli
from subword_lattice.config import LatticeConfig


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> LatticeConfig:
    config = LatticeConfig(
        _env_file=None,
        log_level="none",
        default_algorithm="bpe",  # type: ignore[call-arg]
    )
    monkeypatch.setattr(cli, "default_config", lambda: config)
    return config


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


class TestTokenizeCommand:
    def test_default_algorithm_from_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run(capsys, "tokenize", "Running")
        assert code == 0
        payload = json.loads(out)
        assert payload["algorithm"] == "bpe"
        assert payload["text"] == "running"
        assert payload["tokens"] == ["running"]
        assert payload["complete"] is True
        assert "frames" not in payload
        assert "edges" not in payload

    def test_trace_and_lattice(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run(capsys, "tokenize", "ab", "-a", "unigram", "--trace", "--lattice")
        assert code == 0
        payload = json.loads(out)
        assert payload["nodes"] == [0, 1, 2]
        assert payload["frames"][0]["id"] == "frame-consider-0"
        assert payload["frames"][-1]["kind"] == "backtrack"
        assert "Infinity" not in out
        assert payload["frames"][0]["cost_table"][1]["cost"] is None

    def test_no_normalize(self, capsys: pytest.CaptureFixture[str]) -> None:
        _, out = _run(capsys, "tokenize", "AB", "--no-normalize")
        assert json.loads(out)["text"] == "AB"

    def test_custom_vocab(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        vocab = tmp_path / "vocab.json"
        vocab.write_text(json.dumps({"run": 3, "##ning": 2}), encoding="utf-8")
        code, out = _run(
            capsys, "tokenize", "running", "--algorithm", "wordpiece", "--vocab", str(vocab)
        )
        assert code == 0
        assert json.loads(out)["tokens"] == ["run", "##ning"]

    def test_id_vocab(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        vocab = tmp_path / "vocab.json"
        vocab.write_text(json.dumps({"ab": 0, "a": 1, "b": 2}), encoding="utf-8")
        code, out = _run(capsys, "tokenize", "ab", "--id-vocab", str(vocab))
        assert code == 0
        assert json.loads(out)["tokens"] == ["ab"]

    def test_missing_vocab_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run(capsys, "tokenize", "ab", "--vocab", str(tmp_path / "nope.json"))
        assert code == 1
        assert out == ""

    def test_unknown_algorithm_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["tokenize", "ab", "--algorithm", "sentencepiece"])
        assert exc_info.value.code == 2

    def test_set_overrides_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        vocab = tmp_path / "vocab.json"
        vocab.write_text(json.dumps({"zz": 1}), encoding="utf-8")
        code, out = _run(
            capsys,
            "tokenize",
            "ab",
            "-a",
            "unigram",
            "--vocab",
            str(vocab),
            "--set",
            "fallback_penalty=2.5",
        )
        assert code == 0
        assert json.loads(out)["cost"] == 5.0

    @pytest.mark.parametrize("pair", ["no_such_field=1", "fallback_penalty", "=3"])
    def test_bad_set_value(self, capsys: pytest.CaptureFixture[str], pair: str) -> None:
        code, out = _run(capsys, "tokenize", "ab", "--set", pair)
        assert code == 1
        assert out == ""

    def test_vocab_options_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            cli.main(["tokenize", "ab", "--vocab", "a.json", "--id-vocab", "b.json"])


class TestValidateCommand:
    def test_prints_rows(self, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run(capsys, "validate", "--algorithm", "unigram")
        assert code == 0
        lines = out.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("Token Accuracy")
        assert lines[-1].startswith("Lattice Backtracks")
