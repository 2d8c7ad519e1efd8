"""Data types for decoding traces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subword_lattice.lattice.types import EdgeId


class FrameKind(str, Enum):
    """Decoding event recorded by an InspectionFrame.

    - ``CONSIDER``: candidates visible from a node, before a decision.
    - ``CHOOSE``: greedy decision, the chosen edge extends the path.
    - ``UPDATE``: Viterbi relaxation that improved a node's best cost.
    - ``BACKTRACK``: one edge visited while reconstructing the Viterbi path.
    """

    CONSIDER = "consider"
    CHOOSE = "choose"
    UPDATE = "update"
    BACKTRACK = "backtrack"


@dataclass(frozen=True, slots=True)
class CostCell:
    """Best-known cost of one node in a Viterbi cost table.

    Attributes:
        node: Character offset.
        cost: Lowest summed edge cost found so far (``inf`` if unreached).
        edge: Edge achieving that cost, or ``None``.
        prev: Predecessor node of that edge (-1 if none).
    """

    node: int
    cost: float
    edge: EdgeId | None
    prev: int


@dataclass(frozen=True, slots=True)
class InspectionFrame:
    """Immutable snapshot of one decoding event.

    Attributes:
        index: Emission order, starting at 0.
        kind: Event class.
        node: Node the event concerns (current node, relaxed source node,
            or the start node of a backtracked edge).
        description: Short human-readable summary.
        candidates: Edges under consideration.
        chosen: Edge chosen or updated, if any.
        partial_path: Selected path as known at this instant.
        cost_table: Full Viterbi cost table after the event
            (cost-minimizing decoding only).
    """

    index: int
    kind: FrameKind
    node: int
    description: str
    candidates: tuple[EdgeId, ...] = ()
    chosen: EdgeId | None = None
    partial_path: tuple[EdgeId, ...] = ()
    cost_table: tuple[CostCell, ...] | None = None

    @property
    def frame_id(self) -> str:
        """Stable string id, e.g. ``frame-update-0-2``."""
        if self.kind is FrameKind.UPDATE and self.chosen is not None:
            return f"frame-update-{self.node}-{self.chosen[1]}"
        if self.kind is FrameKind.CHOOSE and self.chosen is not None:
            start, end, label = self.chosen
            return f"frame-choose-{start}-{end}-{label}"
        return f"frame-{self.kind.value}-{self.node}"
