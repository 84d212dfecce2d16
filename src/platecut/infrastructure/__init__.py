"""Infrastructure layer: rendering, serialization and export of results."""

from platecut.infrastructure.cut_diagram_renderer import (
    REQUEST_COLORS,
    CutDiagramRenderer,
)
from platecut.infrastructure.exporters import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonResultExporter,
    SvgExporter,
)
from platecut.infrastructure.formatters import (
    JsonResultFormatter,
    request_breakdown,
    result_to_dict,
)

__all__ = [
    "REQUEST_COLORS",
    "CutDiagramRenderer",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonResultExporter",
    "JsonResultFormatter",
    "SvgExporter",
    "request_breakdown",
    "result_to_dict",
]
