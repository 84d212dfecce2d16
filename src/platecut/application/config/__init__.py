"""Configuration schema and loading for plate cutting calculations.

Public API:
    - CalculationConfiguration: Root configuration model
    - PlateConfig, CutRequestConfig, OptionsConfig, OutputConfig: Section models
    - load_config / load_config_from_dict: Load and validate configurations
    - ConfigError: Exception for configuration errors
    - validate_config: Advisory checks on a parsed configuration
    - merge_config_with_cli: Apply command line overrides
    - config_to_plate / config_to_requests / config_to_options: Domain adapters

Example:
    >>> from pathlib import Path
    >>> from platecut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("plates.json"))
    ...     print(f"Plate: {config.plate.width}x{config.plate.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from platecut.application.config.adapter import (
    config_to_options,
    config_to_plate,
    config_to_requests,
)
from platecut.application.config.loader import (
    ConfigError,
    format_location,
    load_config,
    load_config_from_dict,
)
from platecut.application.config.merger import merge_config_with_cli
from platecut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CalculationConfiguration,
    CutRequestConfig,
    OptionsConfig,
    OutputConfig,
    OutputFormat,
    PlateConfig,
)
from platecut.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "CalculationConfiguration",
    "CutRequestConfig",
    "OptionsConfig",
    "OutputConfig",
    "OutputFormat",
    "PlateConfig",
    # Loader
    "ConfigError",
    "format_location",
    "load_config",
    "load_config_from_dict",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_config",
    # Merging
    "merge_config_with_cli",
    # Adapters
    "config_to_options",
    "config_to_plate",
    "config_to_requests",
]
