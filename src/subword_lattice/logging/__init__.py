"""Diagnostic logging subsystem for subword-lattice.

Provides immutable per-call tokenization records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from subword_lattice.logging.logger import TokenizationLogger
from subword_lattice.logging.types import TokenizationRecord

__all__ = [
    "TokenizationLogger",
    "TokenizationRecord",
]
