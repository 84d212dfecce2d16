"""Tests for the Split Shorter Leftover Axis guillotine splitter."""

from __future__ import annotations

from platecut.domain import FreeRectangle
from platecut.domain.services import split_free_rectangle


class TestSplitFreeRectangle:
    """Tests for split_free_rectangle."""

    def test_vertical_cut_when_leftover_width_is_smaller(self) -> None:
        rect = FreeRectangle(0, 0, 1200, 3000)
        assert split_free_rectangle(rect, 600, 1000) == [
            FreeRectangle(600, 0, 600, 3000),
            FreeRectangle(0, 1000, 600, 2000),
        ]

    def test_vertical_cut_on_equal_leftovers(self) -> None:
        rect = FreeRectangle(0, 0, 100, 100)
        assert split_free_rectangle(rect, 60, 60) == [
            FreeRectangle(60, 0, 40, 100),
            FreeRectangle(0, 60, 60, 40),
        ]

    def test_horizontal_cut_when_leftover_height_is_smaller(self) -> None:
        rect = FreeRectangle(10, 20, 300, 100)
        assert split_free_rectangle(rect, 100, 80) == [
            FreeRectangle(10, 100, 300, 20),
            FreeRectangle(110, 20, 200, 80),
        ]

    def test_only_width_left(self) -> None:
        rect = FreeRectangle(5, 5, 100, 50)
        assert split_free_rectangle(rect, 70, 50) == [FreeRectangle(75, 5, 30, 50)]

    def test_only_height_left(self) -> None:
        rect = FreeRectangle(0, 40, 100, 50)
        assert split_free_rectangle(rect, 100, 20) == [FreeRectangle(0, 60, 100, 30)]

    def test_exact_fit_leaves_nothing(self) -> None:
        assert split_free_rectangle(FreeRectangle(0, 0, 500, 500), 500, 500) == []

    def test_pieces_and_leftovers_tile_the_rectangle(self) -> None:
        rect = FreeRectangle(0, 0, 97, 43)
        for width, height in [(10, 40), (90, 5), (50, 20), (97, 1)]:
            new_rects = split_free_rectangle(rect, width, height)
            assert width * height + sum(r.area for r in new_rects) == rect.area
