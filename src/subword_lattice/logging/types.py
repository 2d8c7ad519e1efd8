"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenizationRecord:
    """Immutable record of a single tokenization call.

    Attributes:
        timestamp_ns: Monotonic start time of the call (nanoseconds).
        elapsed_ms: Total time for normalize + build + decode (ms).
        algorithm: Value of the Algorithm used.
        normalized: Whether the input was normalized.
        text_length: Length of the lattice text.
        edge_count: Number of lattice edges.
        fallback_edge_count: Number of single-character fallback edges.
        token_count: Number of tokens on the selected path.
        path_cost: Summed score of the selected path.
        complete: True if the selected path reaches the end of the text.
        frame_count: Inspection frames emitted (0 for untraced calls).
        update_count: Cost-improving update frames (0 for untraced calls).
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    # Timing
    timestamp_ns: int
    elapsed_ms: float

    # Input
    algorithm: str
    normalized: bool
    text_length: int

    # Lattice
    edge_count: int
    fallback_edge_count: int

    # Decoding
    token_count: int
    path_cost: float
    complete: bool

    # Trace
    frame_count: int
    update_count: int

    # Config snapshot
    config_hash: str
