"""Application commands (use cases) for plate cutting."""

from __future__ import annotations

import logging

from platecut.domain import PackingEngine, PackingResult
from platecut.domain.services.packing import CancelCheck

from .dtos import CalculationInput

logger = logging.getLogger(__name__)


class CalculateLayoutCommand:
    """Command to compute cutting layouts for a cut list.

    Interactive callers re-run the command whenever their input changes;
    results are returned, never cached.
    """

    def __init__(self, engine: PackingEngine | None = None) -> None:
        self.engine = engine or PackingEngine()

    def execute(
        self,
        calculation: CalculationInput,
        should_cancel: CancelCheck | None = None,
    ) -> PackingResult:
        """Run the packing engine for one input.

        Args:
            calculation: Plate, cut requests and options.
            should_cancel: Optional callback checked between plates.

        Returns:
            The packing result. Pieces that fit no plate are listed in
            ``result.unplaced``.

        Raises:
            InvalidRequestError: If a request is malformed.
            PackingCancelledError: If the calculation was cancelled.
        """
        result = self.engine.pack(
            calculation.plate,
            calculation.requests,
            calculation.options,
            should_cancel=should_cancel,
        )

        summary = result.summary
        logger.info(
            "Calculated %d plate(s) for %d piece(s): %.2f%% efficiency, %d unplaced",
            summary.plates_required,
            summary.total_pieces_placed,
            summary.efficiency_percent,
            len(result.unplaced),
        )
        return result
