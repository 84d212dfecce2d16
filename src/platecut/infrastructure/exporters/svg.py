"""SVG exporter for cut diagrams.

Wraps CutDiagramRenderer to write all plates of a result, either as one
combined document or as one file per plate.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from platecut.domain import PackingResult
from platecut.infrastructure.cut_diagram_renderer import CutDiagramRenderer
from platecut.infrastructure.exporters.base import ExporterRegistry


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for plate layouts.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(self, scale: float = 0.25, show_dimensions: bool = True) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per millimeter (default 0.25).
            show_dimensions: Whether to label pieces and waste with their size.
        """
        self.renderer = CutDiagramRenderer(scale=scale, show_dimensions=show_dimensions)

    def export(self, result: PackingResult, path: Path) -> None:
        """Write all plates stacked vertically into one SVG file."""
        path.write_text(self.export_string(result), encoding="utf-8")

    def export_string(self, result: PackingResult) -> str:
        return self.renderer.render_combined_svg(result)

    def export_individual_plates(self, result: PackingResult, base_path: Path) -> list[Path]:
        """Write one SVG file per plate.

        Args:
            result: The packing result.
            base_path: Base path for output files. With more than one plate
                the files are named ``{stem}_1.svg``, ``{stem}_2.svg``, etc.

        Returns:
            Paths of the created files, in plate order.
        """
        svgs = self.renderer.render_all_svg(result)
        created_files: list[Path] = []

        for i, svg_content in enumerate(svgs, start=1):
            if len(svgs) == 1:
                file_path = base_path
            else:
                suffix = base_path.suffix or ".svg"
                file_path = base_path.parent / f"{base_path.stem}_{i}{suffix}"

            file_path.write_text(svg_content, encoding="utf-8")
            created_files.append(file_path)

        return created_files
