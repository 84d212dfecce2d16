"""Tests for the calculation use case and its input DTO."""

from __future__ import annotations

import logging

import pytest

from platecut.application import CalculateLayoutCommand, CalculationInput
from platecut.application.config import load_config_from_dict
from platecut.domain import (
    CutRequest,
    PackingCancelledError,
    PackingEngine,
    PackingOptions,
    StockPlate,
)


@pytest.fixture
def calculation() -> CalculationInput:
    return CalculationInput(
        plate=StockPlate(1200, 3000),
        requests=(CutRequest(1, 600, 1000, 5),),
    )


class TestCalculationInput:
    """Tests for CalculationInput."""

    def test_from_config(self) -> None:
        config = load_config_from_dict(
            {
                "plate": {"width": 2440, "height": 1220},
                "requests": [
                    {"id": "a", "width": 100, "height": 200, "quantity": 3},
                    {"id": 2, "width": 0, "height": 10},
                ],
                "options": {"allow_rotation": True},
            }
        )
        calculation = CalculationInput.from_config(config)

        assert calculation.plate == StockPlate(2440, 1220)
        assert calculation.requests == (
            CutRequest("a", 100, 200, 3),
            CutRequest(2, 0, 10, 1),
        )
        assert calculation.options == PackingOptions(allow_rotation=True)

    def test_default_options(self, calculation: CalculationInput) -> None:
        assert calculation.options.allow_rotation is False


class TestCalculateLayoutCommand:
    """Tests for CalculateLayoutCommand."""

    def test_execute(self, calculation: CalculationInput) -> None:
        result = CalculateLayoutCommand().execute(calculation)
        assert result.summary.total_pieces_placed == 5
        assert result.summary.plates_required == 1

    def test_uses_injected_engine(self, calculation: CalculationInput) -> None:
        engine = PackingEngine()
        command = CalculateLayoutCommand(engine=engine)
        assert command.engine is engine

    def test_logs_run_summary(
        self, calculation: CalculationInput, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="platecut.application.commands"):
            CalculateLayoutCommand().execute(calculation)
        assert "Calculated 1 plate(s) for 5 piece(s)" in caplog.text

    def test_cancellation_propagates(self, calculation: CalculationInput) -> None:
        with pytest.raises(PackingCancelledError):
            CalculateLayoutCommand().execute(calculation, should_cancel=lambda: True)

    def test_results_are_independent(self, calculation: CalculationInput) -> None:
        command = CalculateLayoutCommand()
        first = command.execute(calculation)
        second = command.execute(calculation)
        assert first == second
        assert first is not second
