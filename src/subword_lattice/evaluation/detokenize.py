"""Heuristic detokenizer shared by the evaluation harness."""

from __future__ import annotations

from collections.abc import Iterable

from subword_lattice.config import LatticeConfig, default_config


def detokenize(tokens: Iterable[str], config: LatticeConfig | None = None) -> str:
    """Join tokens back into text.

    - Continuation-marked tokens (``##ing``) attach to the previous token.
    - Word-initial-marked tokens (``Ġword``) start a new word; the marker
      is dropped.
    - Any other token is separated from the previous one by a space.

    Args:
        tokens: Token labels in order.
        config: Supplies the two markers; defaults to the process config.

    Returns:
        The joined text without leading or trailing whitespace.
    """
    config = config if config is not None else default_config()
    continuation = config.continuation_marker
    word_initial = config.word_initial_marker

    out = ""
    for idx, token in enumerate(tokens):
        if continuation and token.startswith(continuation):
            out += token[len(continuation) :]
        elif word_initial and token.startswith(word_initial):
            if out:
                out += " "
            out += token[len(word_initial) :]
        else:
            if idx > 0:
                out += " "
            out += token
    return out.strip()
