"""FastAPI dependency injection for calculation services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from platecut.application import CalculateLayoutCommand


@lru_cache(maxsize=1)
def get_calculate_command() -> CalculateLayoutCommand:
    """Shared CalculateLayoutCommand; the engine keeps no state between runs."""
    return CalculateLayoutCommand()


CalculateCommandDep = Annotated[CalculateLayoutCommand, Depends(get_calculate_command)]
