"""Layout calculation endpoints.

The packing engine is CPU bound, so every run goes through
``asyncio.to_thread`` to keep the event loop responsive.
"""

import asyncio

from fastapi import APIRouter, Query
from fastapi.responses import Response

from platecut.application import CalculateLayoutCommand, CalculationInput
from platecut.application.config import CalculationConfiguration, load_config_from_dict
from platecut.domain import PackingResult
from platecut.infrastructure import CutDiagramRenderer, result_to_dict
from platecut.web.dependencies import CalculateCommandDep
from platecut.web.schemas.requests import CalculateFromConfigRequest, CalculateRequest
from platecut.web.schemas.responses import CalculationResultSchema

router = APIRouter(prefix="/calculate", tags=["calculate"])


def request_to_config(request: CalculateRequest) -> CalculationConfiguration:
    """Validate an API body with the configuration file rules (unique ids)."""
    return load_config_from_dict(request.model_dump())


async def run_calculation(
    command: CalculateLayoutCommand, config: CalculationConfiguration
) -> PackingResult:
    """Run the command for ``config`` in a worker thread."""
    return await asyncio.to_thread(command.execute, CalculationInput.from_config(config))


def _result_to_schema(result: PackingResult) -> CalculationResultSchema:
    return CalculationResultSchema.model_validate(result_to_dict(result))


@router.post("", response_model=CalculationResultSchema)
async def calculate_layout(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculationResultSchema:
    """Calculate cutting layouts for a plate and cut list.

    Args:
        request: Plate, cut list and options.
        command: Injected CalculateLayoutCommand.

    Returns:
        Layouts, summary, unplaced pieces and per-request counts.
    """
    result = await run_calculation(command, request_to_config(request))
    return _result_to_schema(result)


@router.post("/from-config", response_model=CalculationResultSchema)
async def calculate_from_config(
    request: CalculateFromConfigRequest,
    command: CalculateCommandDep,
) -> CalculationResultSchema:
    """Calculate from a complete configuration file body.

    Raises:
        ConfigError: If the configuration is invalid (422).
    """
    config = load_config_from_dict(request.config)
    result = await run_calculation(command, config)
    return _result_to_schema(result)


@router.post("/svg")
async def calculate_svg(
    request: CalculateRequest,
    command: CalculateCommandDep,
    scale: float = Query(default=0.25, gt=0, le=10, description="Pixels per mm"),
) -> Response:
    """Calculate layouts and return all plates as one SVG document."""
    result = await run_calculation(command, request_to_config(request))
    svg_content = CutDiagramRenderer(scale=scale).render_combined_svg(result)
    return Response(content=svg_content, media_type="image/svg+xml")
