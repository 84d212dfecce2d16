"""Multi-plate guillotine packing engine.

The engine expands the cut list, sorts it largest-first and then packs
plate after plate. Each plate starts as one free rectangle; every piece
is placed with Best Short Side Fit and the consumed rectangle is split
with Split Shorter Leftover Axis. Pieces that do not fit are deferred to
the next plate in their sorted order. When a fresh plate takes no piece
at all the remaining pieces can never be placed and the loop stops.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from platecut.domain.entities import Layout, PackingResult, UnplacedPiece
from platecut.domain.exceptions import PackingCancelledError
from platecut.domain.value_objects import (
    CutRequest,
    PackingOptions,
    Piece,
    PlacedPiece,
    StockPlate,
)

from .expander import expand_requests, sort_by_area, validate_requests
from .free_rectangles import FreeRectangleTracker
from .guillotine import split_free_rectangle
from .placement import find_best_fit
from .stats import StatsAggregator

logger = logging.getLogger(__name__)

CancelCheck = Callable[[], bool]


class PackingEngine:
    """Packs cut requests onto identical stock plates.

    The engine holds no state between calls; every call to :meth:`pack`
    builds its own candidate list and one tracker per plate, so the same
    input always produces the same result.

    Attributes:
        stats: Aggregator used for per-plate and global statistics.
    """

    def __init__(self, stats: StatsAggregator | None = None) -> None:
        self.stats = stats or StatsAggregator()

    def pack(
        self,
        plate: StockPlate,
        requests: Sequence[CutRequest],
        options: PackingOptions | None = None,
        should_cancel: CancelCheck | None = None,
    ) -> PackingResult:
        """Pack all requested pieces onto as many plates as needed.

        Args:
            plate: Stock plate, reused for every layout.
            requests: Cut list. Requests with non-positive values are ignored.
            options: Packing options (rotation). Defaults to no rotation.
            should_cancel: Optional callback checked before each new plate.

        Returns:
            PackingResult with layouts, summary and unplaced pieces.

        Raises:
            InvalidRequestError: If a request has a malformed field.
            PackingCancelledError: If ``should_cancel`` returned True.
        """
        options = options or PackingOptions()
        validate_requests(requests)

        pieces = sort_by_area(expand_requests(requests))
        requested_counts = {r.id: r.quantity for r in requests if r.is_valid}

        if not pieces:
            logger.debug("No valid requests, returning empty result")
            return PackingResult(plate=plate, requested_counts=requested_counts)

        if not plate.is_valid:
            logger.info(
                "Plate %dx%d is degenerate, %d piece(s) unplaced",
                plate.width,
                plate.height,
                len(pieces),
            )
            return PackingResult(
                plate=plate,
                unplaced=_to_unplaced(pieces),
                requested_counts=requested_counts,
            )

        logger.debug(
            "Packing %d pieces onto %dx%d plates (rotation %s)",
            len(pieces),
            plate.width,
            plate.height,
            "allowed" if options.allow_rotation else "disallowed",
        )

        layouts: list[Layout] = []
        candidates = pieces
        deferred: list[Piece] = []

        while candidates:
            if should_cancel is not None and should_cancel():
                raise PackingCancelledError(len(layouts))

            placed, tracker, deferred = self._pack_single_plate(
                plate, candidates, options.allow_rotation
            )

            if placed:
                layout = self.stats.build_layout(
                    len(layouts), plate, placed, tracker.snapshot()
                )
                layouts.append(layout)
                logger.debug(
                    "Plate %d: %d pieces, %.2f%% efficiency, %d deferred",
                    layout.plate_index + 1,
                    layout.piece_count,
                    layout.efficiency_percent,
                    len(deferred),
                )

            if len(deferred) == len(candidates):
                logger.info(
                    "Stalled: %d piece(s) do not fit a %dx%d plate",
                    len(deferred),
                    plate.width,
                    plate.height,
                )
                break

            candidates = deferred

        return PackingResult(
            plate=plate,
            layouts=tuple(layouts),
            summary=self.stats.summarize(plate, layouts),
            unplaced=_to_unplaced(deferred),
            requested_counts=requested_counts,
        )

    def _pack_single_plate(
        self,
        plate: StockPlate,
        candidates: list[Piece],
        allow_rotation: bool,
    ) -> tuple[list[PlacedPiece], FreeRectangleTracker, list[Piece]]:
        """Place as many candidates as possible on one fresh plate.

        Args:
            plate: Stock plate to fill.
            candidates: Pieces to try, in sorted order.
            allow_rotation: Whether pieces may be turned 90 degrees.

        Returns:
            Tuple of (placed pieces, final free space, deferred pieces).
        """
        tracker = FreeRectangleTracker.for_plate(plate)
        placed: list[PlacedPiece] = []
        deferred: list[Piece] = []

        for piece in candidates:
            choice = find_best_fit(piece, tracker, allow_rotation)
            if choice is None:
                deferred.append(piece)
                continue

            rect = tracker.take(choice.rect_index)
            placed.append(
                PlacedPiece(
                    source_id=piece.source_id,
                    instance_index=piece.instance_index,
                    x=rect.x,
                    y=rect.y,
                    width=choice.width,
                    height=choice.height,
                    rotated=choice.rotated,
                )
            )
            tracker.add_all(split_free_rectangle(rect, choice.width, choice.height))

        return placed, tracker, deferred


def _to_unplaced(pieces: Sequence[Piece]) -> tuple[UnplacedPiece, ...]:
    return tuple(UnplacedPiece(p.source_id, p.instance_index) for p in pieces)
