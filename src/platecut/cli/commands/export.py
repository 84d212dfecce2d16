"""Export command writing a calculation result in several formats."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from platecut.application import CalculateLayoutCommand, CalculationInput
from platecut.application.config import ConfigError, load_config
from platecut.cli.commands.validate import display_load_error
from platecut.infrastructure.exporters import ExporterRegistry, ExportManager


def parse_formats(formats_str: str) -> list[str]:
    """Parse a comma-separated format list, or "all".

    Raises:
        typer.Exit: With code 1 if a format is not registered.
    """
    available = ExporterRegistry.available_formats()
    if formats_str.strip().lower() == "all":
        return available

    formats = [f.strip().lower() for f in formats_str.split(",") if f.strip()]
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)
    return formats


def export_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON calculation file"),
    ],
    formats: Annotated[
        str,
        typer.Option("--formats", help="Comma-separated formats (json, svg) or 'all'"),
    ] = "all",
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-d", help="Directory for exported files"),
    ] = Path("."),
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Base file name (default: config file name)"),
    ] = None,
) -> None:
    """Calculate a layout and write it in one or more formats.

    Examples:
        platecut export kitchen.json --formats json,svg --output-dir ./out
        platecut export kitchen.json --name batch-7
    """
    format_list = parse_formats(formats)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = CalculateLayoutCommand().execute(CalculationInput.from_config(config))

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(format_list, result, name or config_file.stem)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
