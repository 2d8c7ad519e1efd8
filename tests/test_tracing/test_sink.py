"""Tests for frame sinks and InspectionFrame."""

from __future__ import annotations

import dataclasses

import pytest

from subword_lattice.tracing import (
    CostCell,
    FrameKind,
    FrameRecorder,
    InspectionFrame,
    NullFrameSink,
)


class TestNullFrameSink:
    def test_disabled(self) -> None:
        assert NullFrameSink().enabled is False

    def test_emit_discards(self) -> None:
        sink = NullFrameSink()
        assert sink.emit(FrameKind.CONSIDER, node=0, description="x") is None


class TestFrameRecorder:
    def test_enabled(self) -> None:
        assert FrameRecorder().enabled is True

    def test_indices_follow_emission_order(self) -> None:
        recorder = FrameRecorder()
        recorder.emit(FrameKind.CONSIDER, node=0, description="first")
        recorder.emit(FrameKind.CHOOSE, node=0, description="second", chosen=(0, 1, "a"))
        assert len(recorder) == 2
        assert [f.index for f in recorder.frames] == [0, 1]
        assert [f.description for f in recorder.frames] == ["first", "second"]

    def test_sequences_are_copied(self) -> None:
        recorder = FrameRecorder()
        path = [(0, 1, "a")]
        recorder.emit(FrameKind.CHOOSE, node=0, description="x", partial_path=path)
        path.append((1, 2, "b"))
        assert recorder.frames[0].partial_path == ((0, 1, "a"),)

    def test_cost_table_stored_as_tuple(self) -> None:
        recorder = FrameRecorder()
        cells = [CostCell(node=0, cost=0.0, edge=None, prev=-1)]
        recorder.emit(FrameKind.CONSIDER, node=0, description="x", cost_table=cells)
        assert recorder.frames[0].cost_table == (cells[0],)

    def test_cost_table_absent_by_default(self) -> None:
        recorder = FrameRecorder()
        recorder.emit(FrameKind.CONSIDER, node=0, description="x")
        assert recorder.frames[0].cost_table is None


class TestInspectionFrame:
    def test_frozen(self) -> None:
        frame = InspectionFrame(index=0, kind=FrameKind.CONSIDER, node=0, description="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            frame.node = 1  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("kind", "node", "chosen", "expected"),
        [
            (FrameKind.CONSIDER, 3, None, "frame-consider-3"),
            (FrameKind.UPDATE, 0, (0, 2, "un"), "frame-update-0-2"),
            (FrameKind.CHOOSE, 2, (2, 7, "happi"), "frame-choose-2-7-happi"),
            (FrameKind.BACKTRACK, 5, (5, 9, "ness"), "frame-backtrack-5"),
        ],
    )
    def test_frame_id(
        self,
        kind: FrameKind,
        node: int,
        chosen: tuple[int, int, str] | None,
        expected: str,
    ) -> None:
        frame = InspectionFrame(index=0, kind=kind, node=node, description="", chosen=chosen)
        assert frame.frame_id == expected
