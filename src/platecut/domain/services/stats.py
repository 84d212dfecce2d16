"""Used and waste area statistics per plate and per run."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from platecut.domain.entities import Layout, PackingSummary
from platecut.domain.value_objects import FreeRectangle, PlacedPiece, StockPlate

_HUNDREDTHS = Decimal("0.01")


def percentage(part: int, whole: int) -> float:
    """``part / whole * 100`` rounded half away from zero to two decimals.

    Computed on exact decimals so that values such as 12.345 round up
    instead of following the binary float representation. Returns 0.0
    when ``whole`` is zero.
    """
    if whole == 0:
        return 0.0
    value = Decimal(part) * 100 / Decimal(whole)
    return float(value.quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


class StatsAggregator:
    """Computes layout and run statistics.

    Areas are integers and the invariant ``used_area + waste_area ==
    plate area`` holds exactly for every layout.
    """

    def build_layout(
        self,
        plate_index: int,
        plate: StockPlate,
        placed_pieces: Sequence[PlacedPiece],
        free_rectangles: Sequence[FreeRectangle],
    ) -> Layout:
        """Create a Layout with its per-plate statistics filled in."""
        used_area = sum(p.area for p in placed_pieces)
        return Layout(
            plate_index=plate_index,
            plate=plate,
            placed_pieces=tuple(placed_pieces),
            free_rectangles=tuple(free_rectangles),
            used_area=used_area,
            waste_area=plate.area - used_area,
            efficiency_percent=percentage(used_area, plate.area),
        )

    def summarize(self, plate: StockPlate, layouts: Sequence[Layout]) -> PackingSummary:
        """Aggregate statistics across all layouts of a run."""
        if not layouts:
            return PackingSummary()

        total_used = sum(layout.used_area for layout in layouts)
        total_waste = sum(layout.waste_area for layout in layouts)
        total_base = plate.area * len(layouts)

        return PackingSummary(
            total_pieces_placed=sum(layout.piece_count for layout in layouts),
            total_used_area=total_used,
            total_waste_area=total_waste,
            total_base_area=total_base,
            efficiency_percent=percentage(total_used, total_base),
            plates_required=len(layouts),
        )
