"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from platecut.infrastructure.exporters import ExporterRegistry
from platecut.web.dependencies import CalculateCommandDep
from platecut.web.exceptions import UnsupportedFormatError
from platecut.web.routers.calculate import request_to_config, run_calculation
from platecut.web.schemas.requests import CalculateRequest
from platecut.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "json": "application/json",
    "svg": "image/svg+xml",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_layout(
    format_name: str,
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> Response:
    """Calculate layouts and return them in a registered export format.

    Raises:
        UnsupportedFormatError: If the format is not registered (400).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    result = await run_calculation(command, request_to_config(request))

    exporter = ExporterRegistry.get(format_name)()
    filename = f"layout.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(result),
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
