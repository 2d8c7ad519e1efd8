"""Tracing subsystem for subword-lattice.

Records every candidate consideration and decision of a decoder as an
ordered sequence of immutable inspection frames for step-by-step playback.
"""

from subword_lattice.tracing.replay import count_backtracks, replay_path, replay_tokens
from subword_lattice.tracing.sink import FrameRecorder, FrameSink, NullFrameSink
from subword_lattice.tracing.types import CostCell, FrameKind, InspectionFrame

__all__ = [
    "CostCell",
    "FrameKind",
    "FrameRecorder",
    "FrameSink",
    "InspectionFrame",
    "NullFrameSink",
    "count_backtracks",
    "replay_path",
    "replay_tokens",
]
