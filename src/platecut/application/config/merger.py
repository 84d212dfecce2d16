"""Merging of command line overrides into a loaded configuration."""

from typing import Any

from platecut.application.config.loader import load_config_from_dict
from platecut.application.config.schema import CalculationConfiguration


def merge_config_with_cli(
    config: CalculationConfiguration,
    *,
    plate_width: int | None = None,
    plate_height: int | None = None,
    requests: list[dict[str, Any]] | None = None,
    allow_rotation: bool | None = None,
    output_format: str | None = None,
    svg_scale: float | None = None,
) -> CalculationConfiguration:
    """Merge CLI arguments with configuration values.

    CLI arguments override the corresponding config value only when they
    are not None. Cuts given on the command line replace the file's cut
    list as a whole.

    Args:
        config: The base configuration.
        plate_width: Override for plate.width.
        plate_height: Override for plate.height.
        requests: Replacement cut list, as request dictionaries.
        allow_rotation: Override for options.allow_rotation.
        output_format: Override for output.format.
        svg_scale: Override for output.svg_scale.

    Returns:
        A new, re-validated configuration.

    Raises:
        ConfigError: If an override makes the configuration invalid.

    Example:
        >>> merged = merge_config_with_cli(config, plate_width=2440)
        >>> merged.plate.width
        2440
    """
    data = config.model_dump(mode="json")

    if plate_width is not None:
        data["plate"]["width"] = plate_width
    if plate_height is not None:
        data["plate"]["height"] = plate_height
    if requests is not None:
        data["requests"] = requests
    if allow_rotation is not None:
        data["options"]["allow_rotation"] = allow_rotation
    if output_format is not None:
        data["output"]["format"] = output_format
    if svg_scale is not None:
        data["output"]["svg_scale"] = svg_scale

    return load_config_from_dict(data)
