"""Exporter framework for packing results.

- Exporter Protocol: interface every exporter implements
- ExporterRegistry: central registry for format discovery
- ExportManager: writes a result in several formats at once

Registered exporters:
- json: result document with per-request breakdown
- svg: cut diagrams, all plates stacked in one file

Usage:
    from platecut.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(output_dir=Path("./output"))
    written = manager.export_all(["json", "svg"], result, project_name="kitchen")
"""

from platecut.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from platecut.infrastructure.exporters.json import JsonResultExporter
from platecut.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonResultExporter",
    "SvgExporter",
]
