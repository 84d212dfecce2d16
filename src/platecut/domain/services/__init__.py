"""Domain services: expansion, placement, splitting, statistics and packing."""

from .expander import expand_requests, sort_by_area, validate_requests
from .free_rectangles import FreeRectangleTracker
from .guillotine import split_free_rectangle
from .packing import PackingEngine
from .placement import PlacementChoice, find_best_fit, short_side_score
from .stats import StatsAggregator, percentage

__all__ = [
    "FreeRectangleTracker",
    "PackingEngine",
    "PlacementChoice",
    "StatsAggregator",
    "expand_requests",
    "find_best_fit",
    "percentage",
    "short_side_score",
    "sort_by_area",
    "split_free_rectangle",
    "validate_requests",
]
