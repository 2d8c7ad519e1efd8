"""Frame sinks: the side channel decoders report their decisions to.

Decoders run the same code whether or not a trace is wanted; only the
sink differs. ``NullFrameSink`` discards everything and tells decoders not
to bother building cost-table snapshots, ``FrameRecorder`` keeps every
frame in emission order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from subword_lattice.tracing.types import CostCell, FrameKind, InspectionFrame

if TYPE_CHECKING:
    from collections.abc import Sequence

    from subword_lattice.lattice.types import EdgeId


class FrameSink(ABC):
    """Receiver of decoding events."""

    @property
    @abstractmethod
    def enabled(self) -> bool:
        """Whether emitted frames are kept (decoders skip snapshots if not)."""

    @abstractmethod
    def emit(
        self,
        kind: FrameKind,
        *,
        node: int,
        description: str,
        candidates: Sequence[EdgeId] = (),
        chosen: EdgeId | None = None,
        partial_path: Sequence[EdgeId] = (),
        cost_table: Sequence[CostCell] | None = None,
    ) -> None:
        """Record one decoding event."""


class NullFrameSink(FrameSink):
    """Discards every frame."""

    @property
    def enabled(self) -> bool:
        return False

    def emit(
        self,
        kind: FrameKind,
        *,
        node: int,
        description: str,
        candidates: Sequence[EdgeId] = (),
        chosen: EdgeId | None = None,
        partial_path: Sequence[EdgeId] = (),
        cost_table: Sequence[CostCell] | None = None,
    ) -> None:
        return None


class FrameRecorder(FrameSink):
    """Appends immutable frames in emission order.

    One recorder per call; frames are never reordered or mutated.
    """

    def __init__(self) -> None:
        self._frames: list[InspectionFrame] = []

    @property
    def enabled(self) -> bool:
        return True

    def emit(
        self,
        kind: FrameKind,
        *,
        node: int,
        description: str,
        candidates: Sequence[EdgeId] = (),
        chosen: EdgeId | None = None,
        partial_path: Sequence[EdgeId] = (),
        cost_table: Sequence[CostCell] | None = None,
    ) -> None:
        self._frames.append(
            InspectionFrame(
                index=len(self._frames),
                kind=kind,
                node=node,
                description=description,
                candidates=tuple(candidates),
                chosen=chosen,
                partial_path=tuple(partial_path),
                cost_table=tuple(cost_table) if cost_table is not None else None,
            )
        )

    @property
    def frames(self) -> tuple[InspectionFrame, ...]:
        """All frames recorded so far."""
        return tuple(self._frames)

    def __len__(self) -> int:
        return len(self._frames)
