"""Command-line interface for subword-lattice.

Usage:
    # Tokenize with the configured default algorithm:
    subword-lattice tokenize "Unhappiness"

    # Greedy WordPiece with a custom vocabulary, printing every frame:
    subword-lattice tokenize "running" --algorithm wordpiece --vocab vocab.json --trace

    # Score the built-in validation cases:
    subword-lattice validate --algorithm bpe

    # Override config fields for one run:
    subword-lattice tokenize "xyz" --set fallback_penalty=2.5 --set max_token_length=8
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING

from subword_lattice.algorithms import Algorithm
from subword_lattice.config import LatticeConfig, default_config, resolve_config
from subword_lattice.engine import TokenizerEngine
from subword_lattice.evaluation import DEFAULT_CASES, run_validation
from subword_lattice.exceptions import ConfigValidationError, SubwordLatticeError
from subword_lattice.vocabulary.loader import load_id_vocabulary, load_vocabulary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from subword_lattice.vocabulary.types import Vocabulary

logger = logging.getLogger("subword_lattice")


def _build_parser(config: LatticeConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subword-lattice",
        description="Build and decode subword segmentation lattices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default=config.default_algorithm,
        choices=[member.value for member in Algorithm],
        help="Segmentation algorithm (default: %(default)s)",
    )
    common.add_argument(
        "--no-normalize",
        dest="normalize",
        action="store_false",
        default=config.normalize,
        help="Skip lower-casing, accent stripping and trimming",
    )
    vocab_group = common.add_mutually_exclusive_group()
    vocab_group.add_argument(
        "--vocab",
        type=str,
        default=None,
        help="JSON vocabulary of (token, score) entries",
    )
    vocab_group.add_argument(
        "--id-vocab",
        type=str,
        default=None,
        help="Hugging Face style {token: id} vocab.json",
    )
    common.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config field for this run (repeatable)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    tok = sub.add_parser("tokenize", parents=[common], help="Tokenize one string")
    tok.add_argument("text", type=str, help="Input text")
    tok.add_argument("--trace", action="store_true", help="Include inspection frames")
    tok.add_argument("--lattice", action="store_true", help="Include nodes and all edges")

    sub.add_parser("validate", parents=[common], help="Score the built-in validation cases")
    return parser


def _parse_overrides(pairs: Sequence[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ConfigValidationError(f"Expected KEY=VALUE, got '{pair}'")
        overrides[key.strip()] = value
    return overrides


def _load_vocab(args: argparse.Namespace) -> Vocabulary | None:
    if args.vocab:
        return load_vocabulary(args.vocab)
    if args.id_vocab:
        return load_id_vocabulary(args.id_vocab)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the requested command.

    Returns:
        Process exit code.
    """
    config = default_config()
    args = _build_parser(config).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = resolve_config(config, _parse_overrides(args.overrides))
        vocabulary = _load_vocab(args)
        if args.command == "tokenize":
            engine = TokenizerEngine(config)
            if args.trace:
                payload = engine.tokenize_with_trace(
                    args.text, args.algorithm, args.normalize, vocabulary
                ).to_dict(include_lattice=args.lattice)
            else:
                payload = engine.tokenize(
                    args.text, args.algorithm, args.normalize, vocabulary
                ).to_dict(include_lattice=args.lattice)
            print(json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False))
        else:
            report = run_validation(
                DEFAULT_CASES, args.algorithm, args.normalize, vocabulary, config
            )
            width = max(len(row.metric) for row in report.rows)
            for row in report.rows:
                print(f"{row.metric:<{width}}  {row.value:>6}  {row.status.value:<10}  {row.notes}")
    except SubwordLatticeError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
