"""Data types for the segmentation lattice."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subword_lattice.algorithms.types import Algorithm

# (start, end, label): identity of an edge for path-membership tests.
EdgeId = tuple[int, int, str]


@dataclass(frozen=True, slots=True)
class Edge:
    """A candidate token match spanning ``text[start:end]``.

    Equality and hashing use ``(start, end, label)`` only.

    Attributes:
        start: Offset of the first covered character (source node).
        end: Offset just past the last covered character (target node).
        label: Matched vocabulary token, or the raw character for a
            fallback edge.
        score: Algorithm-dependent cost or rank.
        is_fallback: True for single-character edges inserted where no
            vocabulary token matched.
    """

    start: int
    end: int
    label: str
    score: float = field(compare=False)
    is_fallback: bool = field(default=False, compare=False)

    @property
    def id(self) -> EdgeId:
        """Identity tuple ``(start, end, label)``."""
        return (self.start, self.end, self.label)

    @property
    def span(self) -> int:
        """Number of characters covered."""
        return self.end - self.start

    @property
    def display_id(self) -> str:
        """Stable string id, e.g. ``edge-0-2-un``."""
        if self.is_fallback:
            return f"edge-{self.start}-{self.end}-fallback-{self.label}"
        return f"edge-{self.start}-{self.end}-{self.label}"


@dataclass(frozen=True, slots=True)
class Lattice:
    """Directed acyclic graph of candidate edges over character offsets.

    Nodes are the offsets ``0..len(text)``. Edges are kept in construction
    order (by start offset, then end offset), which is also the order in
    which decoders see a node's outgoing edges.

    Attributes:
        text: The (possibly normalized) text the lattice was built over.
        edges: All candidate edges in construction order.
        algorithm: Algorithm whose scoring produced the edge scores.
    """

    text: str
    edges: tuple[Edge, ...]
    algorithm: Algorithm
    _outgoing: dict[int, tuple[Edge, ...]] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )
    _by_id: dict[EdgeId, Edge] = field(init=False, repr=False, compare=False, default_factory=dict)

    def __post_init__(self) -> None:
        grouped: dict[int, list[Edge]] = {}
        for edge in self.edges:
            grouped.setdefault(edge.start, []).append(edge)
            self._by_id.setdefault(edge.id, edge)
        self._outgoing.update({node: tuple(edges) for node, edges in grouped.items()})

    @property
    def nodes(self) -> tuple[int, ...]:
        """Character offsets ``0..len(text)`` inclusive."""
        return tuple(range(len(self.text) + 1))

    @property
    def sink(self) -> int:
        """The final node, ``len(text)``."""
        return len(self.text)

    def outgoing(self, node: int) -> tuple[Edge, ...]:
        """Edges leaving *node*, in construction order."""
        return self._outgoing.get(node, ())

    def edge(self, edge_id: EdgeId) -> Edge:
        """Look up an edge by identity.

        Raises:
            KeyError: If no edge with that identity exists.
        """
        return self._by_id[edge_id]

    def __contains__(self, edge_id: object) -> bool:
        return edge_id in self._by_id

    def labels(self, path: Sequence[EdgeId]) -> list[str]:
        """Token labels of the edges on *path*."""
        return [self._by_id[edge_id].label for edge_id in path]

    def path_cost(self, path: Sequence[EdgeId]) -> float:
        """Sum of edge scores along *path*."""
        return float(sum(self._by_id[edge_id].score for edge_id in path))

    def enumerate_paths(self) -> Iterator[tuple[EdgeId, ...]]:
        """Yield every path from node 0 to the sink.

        Exponential in the text length; meant for short strings only.
        """
        sink = self.sink
        if sink == 0:
            yield ()
            return
        stack: list[tuple[int, tuple[EdgeId, ...]]] = [(0, ())]
        while stack:
            node, prefix = stack.pop()
            for edge in reversed(self.outgoing(node)):
                path = (*prefix, edge.id)
                if edge.end == sink:
                    yield path
                else:
                    stack.append((edge.end, path))
