"""Conversion from configuration models to domain value objects."""

from platecut.application.config.schema import CalculationConfiguration
from platecut.domain import CutRequest, PackingOptions, StockPlate


def config_to_plate(config: CalculationConfiguration) -> StockPlate:
    """Build the stock plate described by a configuration."""
    return StockPlate(width=config.plate.width, height=config.plate.height)


def config_to_requests(config: CalculationConfiguration) -> list[CutRequest]:
    """Build cut requests in file order.

    Requests with non-positive values are passed through unchanged; the
    packing engine skips them.
    """
    return [
        CutRequest(
            id=request.id,
            width=request.width,
            height=request.height,
            quantity=request.quantity,
        )
        for request in config.requests
    ]


def config_to_options(config: CalculationConfiguration) -> PackingOptions:
    """Build packing options from a configuration."""
    return PackingOptions(allow_rotation=config.options.allow_rotation)
