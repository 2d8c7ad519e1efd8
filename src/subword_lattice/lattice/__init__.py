"""Lattice subsystem for subword-lattice.

Builds the directed acyclic graph of candidate token edges over the
character offsets of a text.
"""

from subword_lattice.lattice.builder import LatticeBuilder, build_lattice
from subword_lattice.lattice.types import Edge, EdgeId, Lattice

__all__ = [
    "Edge",
    "EdgeId",
    "Lattice",
    "LatticeBuilder",
    "build_lattice",
]
