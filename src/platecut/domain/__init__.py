"""Domain layer - plate cutting value objects, results and packing services."""

from .entities import Layout, PackingResult, PackingSummary, UnplacedPiece
from .exceptions import InvalidRequestError, PackingCancelledError
from .services import (
    FreeRectangleTracker,
    PackingEngine,
    StatsAggregator,
    expand_requests,
    find_best_fit,
    sort_by_area,
    split_free_rectangle,
)
from .value_objects import (
    CutRequest,
    FreeRectangle,
    PackingOptions,
    Piece,
    PlacedPiece,
    RequestId,
    StockPlate,
)

__all__ = [
    # Value objects
    "CutRequest",
    "FreeRectangle",
    "PackingOptions",
    "Piece",
    "PlacedPiece",
    "RequestId",
    "StockPlate",
    # Entities
    "Layout",
    "PackingResult",
    "PackingSummary",
    "UnplacedPiece",
    # Exceptions
    "InvalidRequestError",
    "PackingCancelledError",
    # Services
    "FreeRectangleTracker",
    "PackingEngine",
    "StatsAggregator",
    "expand_requests",
    "find_best_fit",
    "sort_by_area",
    "split_free_rectangle",
]
