"""Validation results and cut list advisories.

Schema errors are raised by the loader. The checks here run on a
configuration that already parsed and point out input the calculator
will silently ignore or can never place.
"""

from dataclasses import dataclass, field
from typing import Any

from platecut.application.config.schema import CalculationConfiguration, CutRequestConfig


@dataclass
class ValidationError:
    """A blocking problem: the calculation cannot produce any layout.

    Attributes:
        path: Location of the problem (e.g. "plate.width").
        message: Human-readable description.
        value: The offending value.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking problem: some input will not appear in the result.

    Attributes:
        path: Location of the problem (e.g. "requests[1]").
        message: Human-readable description.
        suggestion: Optional remediation.
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Collected errors and warnings for one configuration."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if there are no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add an error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def _fits_plate(
    request: CutRequestConfig, plate_width: int, plate_height: int, allow_rotation: bool
) -> bool:
    if request.width <= plate_width and request.height <= plate_height:
        return True
    return allow_rotation and request.height <= plate_width and request.width <= plate_height


def validate_config(config: CalculationConfiguration) -> ValidationResult:
    """Check a parsed configuration for input the calculator cannot use.

    - A plate with a non-positive side is an error.
    - An empty cut list is an error.
    - Requests with a non-positive width, height or quantity are warnings
      (they are ignored).
    - Requests larger than the plate in every allowed orientation are
      warnings (they will be reported as unplaced).

    Args:
        config: A configuration already validated by Pydantic.

    Returns:
        ValidationResult with any errors and warnings.
    """
    result = ValidationResult()
    plate = config.plate
    allow_rotation = config.options.allow_rotation

    if plate.width <= 0:
        result.add_error("plate.width", "Plate width must be positive", plate.width)
    if plate.height <= 0:
        result.add_error("plate.height", "Plate height must be positive", plate.height)
    if not config.requests:
        result.add_error("requests", "Cut list is empty")

    for index, request in enumerate(config.requests):
        path = f"requests[{index}]"
        if request.width <= 0 or request.height <= 0 or request.quantity <= 0:
            result.add_warning(
                path,
                f"Request {request.id!r} has a non-positive width, height or "
                f"quantity and will be ignored",
            )
            continue

        if result.is_valid and not _fits_plate(
            request, plate.width, plate.height, allow_rotation
        ):
            suggestion = None
            if not allow_rotation and _fits_plate(request, plate.width, plate.height, True):
                suggestion = "Enable allow_rotation to place this piece"
            result.add_warning(
                path,
                f"Request {request.id!r} ({request.width}x{request.height}) does not "
                f"fit a {plate.width}x{plate.height} plate",
                suggestion,
            )

    return result
