"""Exporter framework: Protocol, Registry and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import ClassVar, Protocol, runtime_checkable

from platecut.domain import PackingResult

logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters write a packing result to a file in one specific format.

    Attributes:
        format_name: Registry name of the format (e.g. "svg", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, result: PackingResult, path: Path) -> None:
        """Write ``result`` to ``path``."""
        ...

    def export_string(self, result: PackingResult) -> str:
        """Return the exported document as a string.

        Raises:
            NotImplementedError: If the format has no text representation.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry of exporter classes, keyed by format name.

    Example:
        @ExporterRegistry.register("json")
        class JsonResultExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator registering an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning("Overwriting existing exporter for format '%s'", format_name)
            cls._exporters[format_name] = exporter_class
            logger.debug("Registered exporter '%s': %s", format_name, exporter_class.__name__)
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes one packing result in several formats into a directory.

    Attributes:
        output_dir: Directory receiving the files. Created on first export.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        result: PackingResult,
        project_name: str = "layout",
    ) -> dict[str, Path]:
        """Export ``result`` to every format in ``formats``.

        Files are named ``{project_name}_{format}.{extension}``.

        Args:
            formats: Format names, e.g. ``["json", "svg"]``.
            result: The packing result to export.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to the written file.

        Raises:
            KeyError: If any format is not registered. Nothing is written
                in that case.
            OSError: If file operations fail.
        """
        exporter_classes = {name: ExporterRegistry.get(name) for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes.items():
            exporter = exporter_class()
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename
            logger.info("Exporting to %s: %s", format_name, filepath)
            exporter.export(result, filepath)
            written[format_name] = filepath

        return written

    def export_single(
        self,
        format_name: str,
        result: PackingResult,
        project_name: str = "layout",
    ) -> Path:
        """Export ``result`` to a single format and return the file path."""
        return self.export_all([format_name], result, project_name)[format_name]
