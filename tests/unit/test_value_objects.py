"""Tests for plate cutting value objects and result entities."""

from __future__ import annotations

import dataclasses

import pytest

from platecut.domain import (
    CutRequest,
    FreeRectangle,
    Layout,
    PackingResult,
    Piece,
    PlacedPiece,
    StockPlate,
    UnplacedPiece,
)


class TestStockPlate:
    """Tests for StockPlate."""

    def test_area(self) -> None:
        assert StockPlate(1200, 3000).area == 3_600_000

    @pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-5, 100)])
    def test_non_positive_side_is_invalid(self, width: int, height: int) -> None:
        assert StockPlate(width, height).is_valid is False

    def test_is_frozen(self) -> None:
        plate = StockPlate(100, 100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            plate.width = 200  # type: ignore[misc]


class TestCutRequest:
    """Tests for CutRequest."""

    def test_default_quantity_is_one(self) -> None:
        assert CutRequest(id="a", width=10, height=20).quantity == 1

    def test_total_area(self) -> None:
        assert CutRequest(id=1, width=10, height=20, quantity=3).total_area == 600

    @pytest.mark.parametrize(
        "width,height,quantity",
        [(0, 10, 1), (10, -1, 1), (10, 10, 0), (10, 10, -2)],
    )
    def test_non_positive_values_are_invalid(
        self, width: int, height: int, quantity: int
    ) -> None:
        assert CutRequest(1, width, height, quantity).is_valid is False


class TestPiece:
    """Tests for Piece."""

    def test_from_request(self) -> None:
        piece = Piece.from_request(CutRequest(id="door", width=600, height=1000), 2)
        assert piece.source_id == "door"
        assert piece.instance_index == 2
        assert (piece.width, piece.height) == (600, 1000)
        assert piece.area == 600_000

    def test_oriented(self) -> None:
        piece = Piece("a", 0, 30, 70, 2100)
        assert piece.oriented(False) == (30, 70)
        assert piece.oriented(True) == (70, 30)


class TestFreeRectangle:
    """Tests for FreeRectangle."""

    def test_fits_exact_size(self) -> None:
        assert FreeRectangle(0, 0, 100, 50).fits(100, 50)

    def test_does_not_fit_larger_side(self) -> None:
        rect = FreeRectangle(0, 0, 100, 50)
        assert not rect.fits(101, 50)
        assert not rect.fits(100, 51)

    def test_to_dict(self) -> None:
        assert FreeRectangle(1, 2, 3, 4).to_dict() == {
            "x": 1,
            "y": 2,
            "width": 3,
            "height": 4,
        }


class TestPlacedPiece:
    """Tests for PlacedPiece."""

    def test_edges(self) -> None:
        placed = PlacedPiece("a", 0, x=10, y=20, width=30, height=40)
        assert placed.right_edge == 40
        assert placed.bottom_edge == 60
        assert placed.area == 1200

    def test_shared_edge_is_not_overlap(self) -> None:
        left = PlacedPiece("a", 0, 0, 0, 50, 50)
        right = PlacedPiece("a", 1, 50, 0, 50, 50)
        assert not left.overlaps(right)
        assert not right.overlaps(left)

    def test_intersection_is_overlap(self) -> None:
        first = PlacedPiece("a", 0, 0, 0, 50, 50)
        second = PlacedPiece("b", 0, 49, 49, 10, 10)
        assert first.overlaps(second)

    def test_overlaps_free_rectangle(self) -> None:
        placed = PlacedPiece("a", 0, 0, 0, 50, 50)
        assert placed.overlaps(FreeRectangle(25, 25, 100, 100))
        assert not placed.overlaps(FreeRectangle(0, 50, 100, 100))

    def test_to_dict_uses_request_id_key(self) -> None:
        placed = PlacedPiece(7, 1, 0, 0, 20, 10, rotated=True)
        assert placed.to_dict() == {
            "request_id": 7,
            "instance_index": 1,
            "x": 0,
            "y": 0,
            "width": 20,
            "height": 10,
            "rotated": True,
        }


class TestLayout:
    """Tests for Layout construction rules."""

    def _layout(self, plate_index: int, pieces: tuple[PlacedPiece, ...]) -> Layout:
        return Layout(
            plate_index=plate_index,
            plate=StockPlate(100, 100),
            placed_pieces=pieces,
            free_rectangles=(),
            used_area=sum(p.area for p in pieces),
            waste_area=10_000 - sum(p.area for p in pieces),
            efficiency_percent=0.0,
        )

    def test_empty_layout_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one placed piece"):
            self._layout(0, ())

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            self._layout(-1, (PlacedPiece("a", 0, 0, 0, 10, 10),))

    def test_piece_count(self) -> None:
        layout = self._layout(
            0, (PlacedPiece("a", 0, 0, 0, 10, 10), PlacedPiece("a", 1, 10, 0, 10, 10))
        )
        assert layout.piece_count == 2


class TestPackingResult:
    """Tests for PackingResult helpers."""

    def test_empty_result_to_dict(self) -> None:
        result = PackingResult(plate=StockPlate(100, 100))
        assert result.to_dict() == {
            "layouts": [],
            "summary": {
                "total_pieces_placed": 0,
                "total_used_area": 0,
                "total_waste_area": 0,
                "total_base_area": 0,
                "efficiency_percent": 0.0,
                "plates_required": 0,
            },
            "unplaced": [],
        }
        assert result.is_complete

    def test_placed_counts_include_unplaced_requests(self) -> None:
        result = PackingResult(
            plate=StockPlate(100, 100),
            unplaced=(UnplacedPiece("big", 0),),
            requested_counts={"big": 1},
        )
        assert result.placed_counts() == {"big": 0}
        assert not result.is_complete
