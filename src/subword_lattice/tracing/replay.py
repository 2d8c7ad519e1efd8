"""Reconstruct decoding outcomes from frame data alone."""

from __future__ import annotations

from typing import TYPE_CHECKING

from subword_lattice.tracing.types import FrameKind, InspectionFrame

if TYPE_CHECKING:
    from collections.abc import Sequence

    from subword_lattice.lattice.types import EdgeId


def replay_path(frames: Sequence[InspectionFrame]) -> tuple[EdgeId, ...]:
    """Return the selected path recorded by a frame sequence.

    The final backtrack frame carries the complete Viterbi path; for greedy
    traces the final choose frame does. A trace with neither (empty text,
    unreachable sink, dead end at node 0) selected nothing.
    """
    for kind in (FrameKind.BACKTRACK, FrameKind.CHOOSE):
        for frame in reversed(frames):
            if frame.kind is kind:
                return frame.partial_path
    return ()


def replay_tokens(frames: Sequence[InspectionFrame]) -> list[str]:
    """Return the token list recorded by a frame sequence."""
    return [label for _, _, label in replay_path(frames)]


def count_backtracks(frames: Sequence[InspectionFrame]) -> int:
    """Number of cost-improving updates, a proxy for lattice ambiguity."""
    return sum(1 for frame in frames if frame.kind is FrameKind.UPDATE)
