"""Application layer - use cases and orchestration."""

from .commands import CalculateLayoutCommand
from .dtos import CalculationInput

__all__ = [
    "CalculateLayoutCommand",
    "CalculationInput",
]
