"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class PlateSchema(BaseModel):
    """Stock plate dimensions in millimeters."""

    width: int = Field(..., description="Plate width in mm")
    height: int = Field(..., description="Plate height in mm")


class CutRequestSchema(BaseModel):
    """One line of the cut list.

    Non-positive values are accepted and the request is ignored, the same
    as in configuration files.
    """

    id: int | str = Field(..., description="Unique request identifier")
    width: int = Field(..., description="Piece width in mm")
    height: int = Field(..., description="Piece height in mm")
    quantity: int = Field(default=1, description="Number of pieces")


class OptionsSchema(BaseModel):
    """Packing options."""

    allow_rotation: bool = Field(
        default=False, description="Allow pieces to be rotated 90 degrees"
    )
