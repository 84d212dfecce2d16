"""Value objects for the plate cutting domain.

All dimensions are integer millimeters. Every class here is a frozen
dataclass: pieces, placements and free rectangles are never mutated,
placing a piece produces a new PlacedPiece instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

RequestId = Union[str, int]


@dataclass(frozen=True)
class StockPlate:
    """Raw rectangular plate that pieces are cut from.

    A plate with a non-positive side is accepted here and treated as
    degenerate input by the packing engine (nothing can be placed on it).

    Attributes:
        width: Plate width in millimeters.
        height: Plate height in millimeters.
    """

    width: int
    height: int

    @property
    def area(self) -> int:
        """Plate area in square millimeters."""
        return self.width * self.height

    @property
    def is_valid(self) -> bool:
        """True if both sides are positive."""
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class CutRequest:
    """A line of the cut list: ``quantity`` pieces of ``width`` x ``height``.

    Requests with a non-positive width, height or quantity are kept as-is
    and skipped during expansion rather than rejected.

    Attributes:
        id: User-assigned identifier, unique within one calculation.
        width: Piece width in millimeters.
        height: Piece height in millimeters.
        quantity: Number of identical pieces required.
    """

    id: RequestId
    width: int
    height: int
    quantity: int = 1

    @property
    def is_valid(self) -> bool:
        """True if the request contributes pieces to a calculation."""
        return self.width > 0 and self.height > 0 and self.quantity > 0

    @property
    def total_area(self) -> int:
        """Combined area of all requested pieces."""
        return self.width * self.height * self.quantity


@dataclass(frozen=True)
class Piece:
    """One physical piece to place, expanded from a CutRequest.

    Attributes:
        source_id: Id of the originating CutRequest.
        instance_index: Zero-based index among that request's pieces.
        width: Requested width in millimeters.
        height: Requested height in millimeters.
        area: ``width * height``, used as the sort key.
    """

    source_id: RequestId
    instance_index: int
    width: int
    height: int
    area: int

    @classmethod
    def from_request(cls, request: CutRequest, instance_index: int) -> "Piece":
        """Create the ``instance_index``-th piece of a request."""
        return cls(
            source_id=request.id,
            instance_index=instance_index,
            width=request.width,
            height=request.height,
            area=request.width * request.height,
        )

    def oriented(self, rotated: bool) -> tuple[int, int]:
        """Return (width, height) for the given orientation."""
        if rotated:
            return self.height, self.width
        return self.width, self.height


@dataclass(frozen=True)
class FreeRectangle:
    """An unoccupied axis-aligned region of a plate.

    Free rectangles of the same plate may overlap each other but never a
    placed piece.
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def fits(self, width: int, height: int) -> bool:
        """Check whether a ``width`` x ``height`` piece fits unrotated."""
        return width <= self.width and height <= self.height

    def to_dict(self) -> dict[str, int]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class PlacedPiece:
    """A piece at its final position on a plate.

    ``width`` and ``height`` are the as-placed dimensions, swapped from
    the piece's requested dimensions when ``rotated`` is True. ``(x, y)``
    is the top-left corner in plate coordinates.
    """

    source_id: RequestId
    instance_index: int
    x: int
    y: int
    width: int
    height: int
    rotated: bool = False

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right_edge(self) -> int:
        """X coordinate of the piece's right edge."""
        return self.x + self.width

    @property
    def bottom_edge(self) -> int:
        """Y coordinate of the piece's bottom edge."""
        return self.y + self.height

    def overlaps(self, other: "PlacedPiece | FreeRectangle") -> bool:
        """Check for a positive-area intersection. Shared edges do not count."""
        return (
            self.x < other.x + other.width
            and other.x < self.right_edge
            and self.y < other.y + other.height
            and other.y < self.bottom_edge
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "request_id": self.source_id,
            "instance_index": self.instance_index,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotated": self.rotated,
        }


@dataclass(frozen=True)
class PackingOptions:
    """Options for one calculation run.

    Attributes:
        allow_rotation: Whether pieces may be turned 90 degrees. Disable
            to respect the grain direction of the plate.
    """

    allow_rotation: bool = False
