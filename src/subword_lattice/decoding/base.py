"""Base classes for lattice decoders.

Defines the abstract interface and result type shared by the greedy and
minimum-cost decoders. Both walk the lattice forward from node 0 and report
each decision to an injected FrameSink.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subword_lattice.lattice.types import EdgeId, Lattice
    from subword_lattice.tracing.sink import FrameSink


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Result of decoding one lattice.

    Attributes:
        path: Selected edges, connected, starting at node 0.
        cost: Sum of the selected edges' scores.
        complete: True if the path ends at the sink (always true for the
            empty text).
    """

    path: tuple[EdgeId, ...]
    cost: float
    complete: bool


class Decoder(ABC):
    """Abstract base class for path-selection strategies.

    Decoders are stateless: everything a decode needs lives in local
    variables, so one instance may serve concurrent calls.
    """

    @abstractmethod
    def decode(self, lattice: Lattice, sink: FrameSink | None = None) -> DecodeResult:
        """Select a path through *lattice*.

        Args:
            lattice: The candidate lattice.
            sink: Receiver of inspection frames; ``None`` discards them.

        Returns:
            DecodeResult with the selected path. A dead end or an
            unreachable sink yields a partial or empty path, never an error.
        """
