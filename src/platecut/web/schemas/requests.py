"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from platecut.web.schemas.common import CutRequestSchema, OptionsSchema, PlateSchema


class CalculateRequest(BaseModel):
    """Request for calculating cutting layouts."""

    plate: PlateSchema = Field(..., description="Stock plate")
    requests: list[CutRequestSchema] = Field(
        default_factory=list, description="Cut list"
    )
    options: OptionsSchema = Field(
        default_factory=OptionsSchema, description="Packing options"
    )


class CalculateFromConfigRequest(BaseModel):
    """Request for calculating from a full configuration file body."""

    config: dict[str, Any] = Field(..., description="Calculation configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Calculation configuration JSON")
