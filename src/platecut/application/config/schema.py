"""Pydantic models for plate cutting configuration files.

A configuration file describes one calculation: the stock plate, the cut
list and the packing options, plus optional output preferences for the
CLI. Numeric fields only have to be integers here. Requests with
non-positive values pass validation and are ignored by the packing
engine, which keeps partially filled forms usable.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for configuration files
# Version 1.0: Plate, requests and rotation option
# Version 1.1: Added output section (format, SVG scale)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class OutputFormat(str, Enum):
    """Report formats produced by the CLI."""

    TEXT = "text"
    ASCII = "ascii"
    JSON = "json"
    SVG = "svg"


class PlateConfig(BaseModel):
    """Stock plate dimensions in millimeters."""

    model_config = ConfigDict(extra="forbid")

    width: int = Field(..., description="Plate width in mm")
    height: int = Field(..., description="Plate height in mm")


class CutRequestConfig(BaseModel):
    """One line of the cut list.

    Attributes:
        id: Unique identifier used to group pieces in reports.
        width: Piece width in mm.
        height: Piece height in mm.
        quantity: Number of pieces (default 1).
    """

    model_config = ConfigDict(extra="forbid")

    id: int | str = Field(..., description="Unique request identifier")
    width: int = Field(..., description="Piece width in mm")
    height: int = Field(..., description="Piece height in mm")
    quantity: int = Field(default=1, description="Number of pieces")


class OptionsConfig(BaseModel):
    """Packing options.

    Rotation is off by default so the grain direction of the plate is
    respected unless the user opts out.
    """

    model_config = ConfigDict(extra="forbid")

    allow_rotation: bool = Field(
        default=False, description="Allow pieces to be rotated 90 degrees"
    )


class OutputConfig(BaseModel):
    """Output preferences for the command line."""

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = Field(default=OutputFormat.TEXT, description="Report format")
    svg_scale: float = Field(
        default=0.25, gt=0, le=10, description="SVG pixels per millimeter"
    )


class CalculationConfiguration(BaseModel):
    """Root model of a calculation file.

    Example:
        >>> config = CalculationConfiguration(
        ...     schema_version="1.0",
        ...     plate=PlateConfig(width=1200, height=3000),
        ...     requests=[CutRequestConfig(id=1, width=600, height=1000, quantity=5)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    plate: PlateConfig
    requests: list[CutRequestConfig] = Field(
        default_factory=list, description="Cut list"
    )
    options: OptionsConfig = Field(default_factory=OptionsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @field_validator("requests")
    @classmethod
    def validate_unique_ids(cls, v: list[CutRequestConfig]) -> list[CutRequestConfig]:
        """Request ids must be unique within one calculation."""
        seen: set[int | str] = set()
        for request in v:
            if request.id in seen:
                raise ValueError(f"duplicate request id {request.id!r}")
            seen.add(request.id)
        return v
