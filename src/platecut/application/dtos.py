"""Data transfer objects for the calculation use case."""

from __future__ import annotations

from dataclasses import dataclass, field

from platecut.application.config import (
    CalculationConfiguration,
    config_to_options,
    config_to_plate,
    config_to_requests,
)
from platecut.domain import CutRequest, PackingOptions, StockPlate


@dataclass(frozen=True)
class CalculationInput:
    """Everything one calculation needs.

    The caller owns this input and the result of running it; the engine
    keeps nothing between runs.
    """

    plate: StockPlate
    requests: tuple[CutRequest, ...]
    options: PackingOptions = field(default_factory=PackingOptions)

    @classmethod
    def from_config(cls, config: CalculationConfiguration) -> "CalculationInput":
        """Build the input described by a validated configuration."""
        return cls(
            plate=config_to_plate(config),
            requests=tuple(config_to_requests(config)),
            options=config_to_options(config),
        )
