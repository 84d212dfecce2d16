"""Best Short Side Fit placement heuristic."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from platecut.domain.value_objects import FreeRectangle, Piece


@dataclass(frozen=True)
class PlacementChoice:
    """Where and how a piece should be placed.

    Attributes:
        rect_index: Index of the chosen free rectangle in the tracker.
        rotated: Whether the piece is turned 90 degrees.
        width: As-placed width.
        height: As-placed height.
        score: Short side leftover; lower is tighter.
    """

    rect_index: int
    rotated: bool
    width: int
    height: int
    score: int


def orientations(allow_rotation: bool) -> tuple[bool, ...]:
    """Orientations to try, unrotated first."""
    return (False, True) if allow_rotation else (False,)


def short_side_score(rect: FreeRectangle, width: int, height: int) -> int:
    """BSSF score: the narrower of the two strips left beside the piece."""
    return min(rect.width - width, rect.height - height)


def find_best_fit(
    piece: Piece,
    free_rectangles: Iterable[FreeRectangle],
    allow_rotation: bool,
) -> PlacementChoice | None:
    """Pick the free rectangle and orientation with the lowest BSSF score.

    Ties go to the first candidate encountered: earlier free rectangles
    win, and within one rectangle the unrotated orientation wins because
    it is tried first and only a strictly lower score replaces the best.

    Args:
        piece: Piece to place.
        free_rectangles: Free rectangles in tracker order.
        allow_rotation: Whether the rotated orientation may be used.

    Returns:
        The best placement, or None if the piece fits nowhere.
    """
    best: PlacementChoice | None = None
    turns = orientations(allow_rotation)

    for index, rect in enumerate(free_rectangles):
        for rotated in turns:
            width, height = piece.oriented(rotated)
            if not rect.fits(width, height):
                continue
            score = short_side_score(rect, width, height)
            if best is None or score < best.score:
                best = PlacementChoice(index, rotated, width, height, score)

    return best
