"""Minimum-cost (Viterbi) decoder.

Exact shortest path on the lattice DAG. Node offsets are already a
topological order, so one forward relaxation pass followed by a backtrack
suffices; no priority queue is needed.

    cost[0] = 0, cost[k] = inf otherwise
    for i in 0..n-1 with cost[i] < inf:
        for edge in outgoing(i):
            if cost[i] + edge.score < cost[edge.end]: record edge
    backtrack from n following recorded edges, then reverse
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from subword_lattice.decoding.base import Decoder, DecodeResult
from subword_lattice.tracing.sink import NullFrameSink
from subword_lattice.tracing.types import CostCell, FrameKind

if TYPE_CHECKING:
    from subword_lattice.lattice.types import EdgeId, Lattice
    from subword_lattice.tracing.sink import FrameSink

logger = logging.getLogger("subword_lattice")


class _CostTable:
    """Per-node best cost, incoming edge and predecessor for one decode."""

    __slots__ = ("cost", "edge", "prev")

    def __init__(self, size: int) -> None:
        self.cost: list[float] = [math.inf] * size
        self.edge: list[EdgeId | None] = [None] * size
        self.prev: list[int] = [-1] * size
        self.cost[0] = 0.0

    def snapshot(self) -> tuple[CostCell, ...]:
        return tuple(
            CostCell(node=node, cost=cost, edge=edge, prev=prev)
            for node, (cost, edge, prev) in enumerate(zip(self.cost, self.edge, self.prev))
        )


class ViterbiDecoder(Decoder):
    """Select the path with the lowest summed edge score.

    Frames: one ``consider`` per reachable node, one ``update`` per strictly
    improving relaxation, and one ``backtrack`` per edge of the final path.
    Cost-table snapshots are only built when the sink keeps frames.
    """

    def decode(self, lattice: Lattice, sink: FrameSink | None = None) -> DecodeResult:
        sink = sink if sink is not None else NullFrameSink()
        tracing = sink.enabled
        n = lattice.sink
        table = _CostTable(n + 1)

        for i in range(n):
            if math.isinf(table.cost[i]):
                continue

            outgoing = lattice.outgoing(i)
            sink.emit(
                FrameKind.CONSIDER,
                node=i,
                description=f"Considering outgoing edges from node {i}",
                candidates=[edge.id for edge in outgoing],
                cost_table=table.snapshot() if tracing else None,
            )

            for edge in outgoing:
                new_cost = table.cost[i] + edge.score
                if new_cost < table.cost[edge.end]:
                    table.cost[edge.end] = new_cost
                    table.edge[edge.end] = edge.id
                    table.prev[edge.end] = i
                    sink.emit(
                        FrameKind.UPDATE,
                        node=i,
                        description=f"Update cost for node {edge.end} via {edge.display_id}",
                        candidates=[edge.id],
                        chosen=edge.id,
                        cost_table=table.snapshot() if tracing else None,
                    )

        if n > 0 and math.isinf(table.cost[n]):
            logger.debug("Viterbi decoder found no path to node %d", n)
            return DecodeResult(path=(), cost=math.inf, complete=False)

        # Backtrack; the suffix grows toward the full path in forward order.
        suffix: list[EdgeId] = []
        node = n
        while node > 0:
            edge_id = table.edge[node]
            if edge_id is None:
                break
            suffix.insert(0, edge_id)
            node = table.prev[node]
            sink.emit(
                FrameKind.BACKTRACK,
                node=node,
                description=f"Backtracking chose {edge_id[2]}",
                chosen=edge_id,
                partial_path=suffix,
                cost_table=table.snapshot() if tracing else None,
            )

        return DecodeResult(path=tuple(suffix), cost=table.cost[n], complete=True)
