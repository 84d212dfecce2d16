"""Free space bookkeeping for a single plate."""

from __future__ import annotations

from typing import Iterable, Iterator

from platecut.domain.value_objects import FreeRectangle, StockPlate


class FreeRectangleTracker:
    """Ordered list of the free rectangles of one plate.

    The tracker is a plain list: rectangles are appended in the order the
    splitter produces them and never merged or deduplicated, so entries
    may describe overlapping space. Encounter order matters because the
    placement heuristic breaks score ties by it.

    One tracker is created per plate and discarded when the plate closes.
    """

    def __init__(self, rectangles: Iterable[FreeRectangle] = ()) -> None:
        self._rectangles: list[FreeRectangle] = list(rectangles)

    @classmethod
    def for_plate(cls, plate: StockPlate) -> "FreeRectangleTracker":
        """Start with a single rectangle covering the whole plate."""
        return cls([FreeRectangle(0, 0, plate.width, plate.height)])

    def __iter__(self) -> Iterator[FreeRectangle]:
        return iter(self._rectangles)

    def __len__(self) -> int:
        return len(self._rectangles)

    def __getitem__(self, index: int) -> FreeRectangle:
        return self._rectangles[index]

    def take(self, index: int) -> FreeRectangle:
        """Remove and return the rectangle at ``index``."""
        return self._rectangles.pop(index)

    def add_all(self, rectangles: Iterable[FreeRectangle]) -> None:
        """Append rectangles, keeping their order."""
        self._rectangles.extend(rectangles)

    def snapshot(self) -> tuple[FreeRectangle, ...]:
        """Immutable copy of the current free rectangles."""
        return tuple(self._rectangles)

    @property
    def total_area(self) -> int:
        """Sum of free areas. Overlapping space is counted more than once."""
        return sum(r.area for r in self._rectangles)
