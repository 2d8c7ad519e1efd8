"""Greedy forward longest-match decoder (BPE and WordPiece)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from subword_lattice.decoding.base import Decoder, DecodeResult
from subword_lattice.tracing.sink import NullFrameSink
from subword_lattice.tracing.types import FrameKind

if TYPE_CHECKING:
    from subword_lattice.lattice.types import Edge, EdgeId, Lattice
    from subword_lattice.tracing.sink import FrameSink

logger = logging.getLogger("subword_lattice")


def longest_edge(candidates: tuple[Edge, ...]) -> Edge:
    """Return the candidate with the largest span.

    Ties go to the first candidate in lattice order. There is no linguistic
    reason to prefer it; the rule only keeps results deterministic.
    """
    best = candidates[0]
    for edge in candidates[1:]:
        if edge.span > best.span:
            best = edge
    return best


class GreedyDecoder(Decoder):
    """At each node take the longest outgoing edge; no lookahead.

    Emits a ``consider`` frame before every decision (also for a dead end)
    and a ``choose`` frame after it.
    """

    def decode(self, lattice: Lattice, sink: FrameSink | None = None) -> DecodeResult:
        sink = sink if sink is not None else NullFrameSink()
        current = 0
        sink_node = lattice.sink
        path: list[EdgeId] = []
        cost = 0.0

        while current < sink_node:
            candidates = lattice.outgoing(current)
            candidate_ids = [edge.id for edge in candidates]
            sink.emit(
                FrameKind.CONSIDER,
                node=current,
                description=f"Considering tokens at index {current}",
                candidates=candidate_ids,
                partial_path=path,
            )

            if not candidates:
                logger.debug("Greedy decoder reached a dead end at node %d", current)
                break

            best = longest_edge(candidates)
            path.append(best.id)
            cost += best.score
            sink.emit(
                FrameKind.CHOOSE,
                node=current,
                description=f"Chose {best.label} ({best.display_id})",
                candidates=candidate_ids,
                chosen=best.id,
                partial_path=path,
            )
            current = best.end

        return DecodeResult(path=tuple(path), cost=cost, complete=current == sink_node)
