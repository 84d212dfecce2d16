"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlacedPieceSchema(BaseModel):
    """A piece positioned on a plate."""

    request_id: int | str = Field(..., description="Id of the originating request")
    instance_index: int = Field(..., description="Zero-based copy number")
    x: int = Field(..., description="Left edge in mm")
    y: int = Field(..., description="Top edge in mm")
    width: int = Field(..., description="Placed width in mm")
    height: int = Field(..., description="Placed height in mm")
    rotated: bool = Field(..., description="Whether the piece was turned 90 degrees")


class FreeRectangleSchema(BaseModel):
    """Unused area left on a plate."""

    x: int
    y: int
    width: int
    height: int


class LayoutSchema(BaseModel):
    """One plate's layout."""

    pieces: list[PlacedPieceSchema] = Field(..., description="Placed pieces")
    waste: list[FreeRectangleSchema] = Field(..., description="Free rectangles")
    used_area: int = Field(..., description="Area covered by pieces in mm2")
    waste_area: int = Field(..., description="Uncovered area in mm2")
    efficiency_percent: float = Field(..., description="Used area percentage")


class SummarySchema(BaseModel):
    """Aggregates over all plates."""

    total_pieces_placed: int
    total_used_area: int
    total_waste_area: int
    total_base_area: int
    efficiency_percent: float
    plates_required: int


class UnplacedPieceSchema(BaseModel):
    """A piece that fits no plate."""

    request_id: int | str
    instance_index: int


class RequestBreakdownSchema(BaseModel):
    """Requested and placed piece counts for one request."""

    request_id: int | str
    requested: int
    placed: int


class CalculationResultSchema(BaseModel):
    """Response for a layout calculation."""

    layouts: list[LayoutSchema] = Field(default_factory=list, description="Plate layouts")
    summary: SummarySchema = Field(..., description="Global statistics")
    unplaced: list[UnplacedPieceSchema] = Field(
        default_factory=list, description="Pieces that could not be placed"
    )
    requests: list[RequestBreakdownSchema] = Field(
        default_factory=list, description="Placed counts per request"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
