"""Tests for the free rectangle tracker."""

from __future__ import annotations

from platecut.domain import FreeRectangle, FreeRectangleTracker, StockPlate


class TestFreeRectangleTracker:
    """Tests for FreeRectangleTracker."""

    def test_for_plate_starts_with_whole_plate(self) -> None:
        tracker = FreeRectangleTracker.for_plate(StockPlate(1200, 3000))
        assert list(tracker) == [FreeRectangle(0, 0, 1200, 3000)]
        assert tracker.total_area == 3_600_000

    def test_take_removes_by_index(self) -> None:
        tracker = FreeRectangleTracker(
            [FreeRectangle(0, 0, 1, 1), FreeRectangle(1, 0, 2, 2)]
        )
        taken = tracker.take(0)
        assert taken == FreeRectangle(0, 0, 1, 1)
        assert len(tracker) == 1
        assert tracker[0] == FreeRectangle(1, 0, 2, 2)

    def test_add_all_appends_in_order(self) -> None:
        tracker = FreeRectangleTracker([FreeRectangle(0, 0, 1, 1)])
        tracker.add_all([FreeRectangle(5, 5, 1, 1), FreeRectangle(3, 3, 1, 1)])
        assert [r.x for r in tracker] == [0, 5, 3]

    def test_no_merging_or_deduplication(self) -> None:
        rect = FreeRectangle(0, 0, 10, 10)
        tracker = FreeRectangleTracker()
        tracker.add_all([rect, rect])
        assert len(tracker) == 2
        assert tracker.total_area == 200

    def test_snapshot_is_independent(self) -> None:
        tracker = FreeRectangleTracker([FreeRectangle(0, 0, 1, 1)])
        snapshot = tracker.snapshot()
        tracker.take(0)
        assert snapshot == (FreeRectangle(0, 0, 1, 1),)
        assert len(tracker) == 0
