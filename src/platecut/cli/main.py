"""Typer CLI for plate cutting calculations."""

import logging
import re
from pathlib import Path
from typing import Annotated, Any

import typer

from platecut.application import CalculateLayoutCommand, CalculationInput
from platecut.application.config import (
    CalculationConfiguration,
    ConfigError,
    OutputFormat,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from platecut.cli.commands import export_command, validate_command
from platecut.cli.commands.validate import display_load_error
from platecut.domain import PackingResult
from platecut.infrastructure import CutDiagramRenderer, JsonResultFormatter

CUT_PATTERN = re.compile(r"^\s*(-?\d+)\s*[xX]\s*(-?\d+)\s*(?:[xX]\s*(-?\d+)\s*)?$")

app = typer.Typer(
    name="platecut",
    help="Calculate guillotine cutting layouts for rectangular stock plates.",
)

app.command(name="validate")(validate_command)
app.command(name="export")(export_command)


def parse_cut(value: str, request_id: int) -> dict[str, Any]:
    """Parse a ``WxH`` or ``WxHxQ`` cut given on the command line.

    Args:
        value: The cut text, e.g. ``"600x1000x5"``.
        request_id: Id assigned to the resulting request.

    Returns:
        Request dictionary in configuration file shape.

    Raises:
        ValueError: If the text is not of the form ``WxH[xQ]``.
    """
    match = CUT_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Invalid cut '{value}', expected WxH or WxHxQ")
    width, height, quantity = match.groups()
    return {
        "id": request_id,
        "width": int(width),
        "height": int(height),
        "quantity": int(quantity) if quantity is not None else 1,
    }


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _build_configuration(
    config_file: Path | None,
    plate_width: int | None,
    plate_height: int | None,
    cuts: list[str] | None,
    allow_rotation: bool | None,
    output_format: OutputFormat | None,
) -> CalculationConfiguration:
    try:
        requests = (
            [parse_cut(cut, i) for i, cut in enumerate(cuts, start=1)] if cuts else None
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    format_value = output_format.value if output_format is not None else None

    try:
        if config_file is not None:
            config = load_config(config_file)
            return merge_config_with_cli(
                config,
                plate_width=plate_width,
                plate_height=plate_height,
                requests=requests,
                allow_rotation=allow_rotation,
                output_format=format_value,
            )

        if plate_width is None or plate_height is None:
            typer.echo(
                "Error: --plate-width and --plate-height are required "
                "when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)
        if not requests:
            typer.echo(
                "Error: at least one --cut is required when --config is not provided",
                err=True,
            )
            raise typer.Exit(code=1)

        data: dict[str, Any] = {
            "plate": {"width": plate_width, "height": plate_height},
            "requests": requests,
        }
        if allow_rotation is not None:
            data["options"] = {"allow_rotation": allow_rotation}
        if format_value is not None:
            data["output"] = {"format": format_value}
        return load_config_from_dict(data)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


def render_result(
    result: PackingResult,
    output_format: OutputFormat,
    svg_scale: float = 0.25,
) -> str:
    """Render a result in one of the CLI report formats."""
    renderer = CutDiagramRenderer(scale=svg_scale)
    if output_format == OutputFormat.JSON:
        return JsonResultFormatter().format(result)
    if output_format == OutputFormat.SVG:
        return renderer.render_combined_svg(result)
    if output_format == OutputFormat.ASCII:
        return renderer.render_all_ascii(result)
    return renderer.render_summary(result)


@app.command()
def calculate(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON calculation file"),
    ] = None,
    plate_width: Annotated[
        int | None,
        typer.Option("--plate-width", "-W", help="Plate width in mm"),
    ] = None,
    plate_height: Annotated[
        int | None,
        typer.Option("--plate-height", "-H", help="Plate height in mm"),
    ] = None,
    cuts: Annotated[
        list[str] | None,
        typer.Option("--cut", help="Piece as WxH or WxHxQ, repeatable"),
    ] = None,
    allow_rotation: Annotated[
        bool | None,
        typer.Option(
            "--allow-rotation/--no-rotation",
            help="Allow pieces to be turned 90 degrees",
            show_default=False,
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: text, ascii, json, svg"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the report to a file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log packing progress to stderr"),
    ] = False,
) -> None:
    """Calculate cutting layouts for a cut list.

    Provide the plate and cuts on the command line or in a JSON file.
    With --config, command line options override the file; --cut
    replaces the file's cut list.

    Examples:
        platecut calculate --plate-width 1200 --plate-height 3000 --cut 600x1000x5
        platecut calculate --config kitchen.json --format svg --output kitchen.svg
        platecut calculate --config kitchen.json --allow-rotation --format ascii
    """
    _configure_logging(verbose)

    config = _build_configuration(
        config_file, plate_width, plate_height, cuts, allow_rotation, output_format
    )

    command = CalculateLayoutCommand()
    result = command.execute(CalculationInput.from_config(config))

    report = render_result(result, config.output.format, config.output.svg_scale)

    if output_file is not None:
        try:
            output_file.write_text(report + "\n", encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error writing {output_file}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Report written to: {output_file}")
    else:
        typer.echo(report)

    if result.unplaced:
        typer.echo(
            f"Warning: {len(result.unplaced)} piece(s) could not be placed",
            err=True,
        )


if __name__ == "__main__":
    app()
