"""Pydantic schemas for the REST API."""

from platecut.web.schemas.common import CutRequestSchema, OptionsSchema, PlateSchema
from platecut.web.schemas.requests import (
    CalculateFromConfigRequest,
    CalculateRequest,
    ConfigValidateRequest,
)
from platecut.web.schemas.responses import (
    CalculationResultSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    FreeRectangleSchema,
    LayoutSchema,
    PlacedPieceSchema,
    RequestBreakdownSchema,
    SummarySchema,
    UnplacedPieceSchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "CutRequestSchema",
    "OptionsSchema",
    "PlateSchema",
    # Requests
    "CalculateFromConfigRequest",
    "CalculateRequest",
    "ConfigValidateRequest",
    # Responses
    "CalculationResultSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "FreeRectangleSchema",
    "LayoutSchema",
    "PlacedPieceSchema",
    "RequestBreakdownSchema",
    "SummarySchema",
    "UnplacedPieceSchema",
    "ValidationResultSchema",
]
