"""JSON exporter for packing results."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from platecut.domain import PackingResult
from platecut.infrastructure.exporters.base import ExporterRegistry
from platecut.infrastructure.formatters import JsonResultFormatter


@ExporterRegistry.register("json")
class JsonResultExporter:
    """Writes the result document with the per-request breakdown.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.formatter = JsonResultFormatter(indent=indent)

    def export(self, result: PackingResult, path: Path) -> None:
        path.write_text(self.export_string(result), encoding="utf-8")

    def export_string(self, result: PackingResult) -> str:
        return self.formatter.format(result)
