"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
import re
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cargoscene.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)

_UNSAFE_FILE_CHARS = re.compile(r"[^\w.-]")


def safe_file_stem(name: str, default: str = "scene") -> str:
    """Reduce ``name`` to a single path component usable as a file stem.

    Path separators and other unsafe characters become underscores and
    leading dots are stripped, so the result never leaves its directory.

    Examples:
        >>> safe_file_stem("20/40ft")
        '20_40ft'
        >>> safe_file_stem("../../etc/passwd")
        '_.._etc_passwd'
    """
    stem = _UNSAFE_FILE_CHARS.sub("_", name).lstrip(".")
    return stem or default


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a LayoutOutput to a specific format.

    Attributes:
        format_name: Name of the export format (e.g., "stl", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export layout output to a file.

        Args:
            output: The layout output to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: LayoutOutput) -> str:
        """Export layout output as a string.

        Binary formats do not support string export.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the @ExporterRegistry.register
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("json")
        class JsonSceneExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
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
    """Exports one layout output to several formats in a directory.

    Attributes:
        output_dir: Directory where exported files will be saved. Created on
            first export.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: LayoutOutput,
        project_name: str = "scene",
    ) -> dict[str, Path]:
        """Export layout output to multiple formats.

        Files are named ``{project_name}_{format}.{ext}``, with the project
        name reduced to a safe file stem.

        Args:
            formats: Format names to export (e.g., ["json", "stl"]).
            output: The layout output to export.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        stem = safe_file_stem(project_name)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / (
                f"{stem}_{format_name}.{exporter.file_extension}"
            )
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: LayoutOutput,
        project_name: str = "scene",
    ) -> Path:
        """Export layout output to a single format and return the file path."""
        return self.export_all([format_name], output, project_name)[format_name]
