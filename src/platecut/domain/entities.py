"""Result entities produced by the packing engine.

A Layout describes one plate, a PackingResult the whole run. Both are
frozen; their numbers are computed once by the stats aggregator and
stored rather than derived on access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .value_objects import FreeRectangle, PlacedPiece, RequestId, StockPlate


@dataclass(frozen=True)
class Layout:
    """One plate's cutting layout.

    Attributes:
        plate_index: Zero-based position of the plate in the result.
        plate: The stock plate the layout was packed on.
        placed_pieces: Pieces placed on this plate, in placement order.
        free_rectangles: Free space left when the plate was closed. This
            is the plate's waste; entries may overlap each other.
        used_area: Sum of the placed pieces' areas.
        waste_area: Plate area minus ``used_area``.
        efficiency_percent: ``used_area / plate area * 100``, two decimals.
    """

    plate_index: int
    plate: StockPlate
    placed_pieces: tuple[PlacedPiece, ...]
    free_rectangles: tuple[FreeRectangle, ...]
    used_area: int
    waste_area: int
    efficiency_percent: float

    def __post_init__(self) -> None:
        if self.plate_index < 0:
            raise ValueError("Plate index must be non-negative")
        if not self.placed_pieces:
            raise ValueError("A layout must contain at least one placed piece")

    @property
    def piece_count(self) -> int:
        """Number of pieces placed on this plate."""
        return len(self.placed_pieces)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pieces": [p.to_dict() for p in self.placed_pieces],
            "waste": [r.to_dict() for r in self.free_rectangles],
            "used_area": self.used_area,
            "waste_area": self.waste_area,
            "efficiency_percent": self.efficiency_percent,
        }


@dataclass(frozen=True)
class UnplacedPiece:
    """A piece that could not be placed on any plate."""

    request_id: RequestId
    instance_index: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_id": self.request_id,
            "instance_index": self.instance_index,
        }


@dataclass(frozen=True)
class PackingSummary:
    """Aggregates over all layouts of a run."""

    total_pieces_placed: int = 0
    total_used_area: int = 0
    total_waste_area: int = 0
    total_base_area: int = 0
    efficiency_percent: float = 0.0
    plates_required: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_pieces_placed": self.total_pieces_placed,
            "total_used_area": self.total_used_area,
            "total_waste_area": self.total_waste_area,
            "total_base_area": self.total_base_area,
            "efficiency_percent": self.efficiency_percent,
            "plates_required": self.plates_required,
        }


@dataclass(frozen=True)
class PackingResult:
    """Complete result of one calculation run.

    Attributes:
        plate: The stock plate used for every layout.
        layouts: Layouts in plate order (plate 1, plate 2, ...).
        summary: Global statistics.
        unplaced: Pieces left over when the stall guard fired.
        requested_counts: Number of pieces requested per valid request id,
            in request order.
    """

    plate: StockPlate
    layouts: tuple[Layout, ...] = ()
    summary: PackingSummary = field(default_factory=PackingSummary)
    unplaced: tuple[UnplacedPiece, ...] = ()
    requested_counts: dict[RequestId, int] = field(default_factory=dict)

    @property
    def is_complete(self) -> bool:
        """True if every requested piece was placed."""
        return not self.unplaced

    def placed_counts(self) -> dict[RequestId, int]:
        """Count placed pieces per request id.

        Every valid request appears in the mapping, with zero when none of
        its pieces could be placed.
        """
        counts: dict[RequestId, int] = {rid: 0 for rid in self.requested_counts}
        for layout in self.layouts:
            for placed in layout.placed_pieces:
                counts[placed.source_id] = counts.get(placed.source_id, 0) + 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the engine output contract."""
        return {
            "layouts": [layout.to_dict() for layout in self.layouts],
            "summary": self.summary.to_dict(),
            "unplaced": [u.to_dict() for u in self.unplaced],
        }
