"""Exporter framework for scene layouts.

Registered exporters:
- json: Scene primitives and layout diagnostics as JSON
- stl: Placed item boxes as a triangle mesh

Usage:
    from cargoscene.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    manager = ExportManager(Path("out"))
    manager.export_all(["json", "stl"], output, project_name="container-7")
"""

from cargoscene.infrastructure.exporters.base import (
    ExportManager,
    Exporter,
    ExporterRegistry,
    safe_file_stem,
)
from cargoscene.infrastructure.exporters.json_exporter import (
    SCHEMA_VERSION,
    JsonSceneExporter,
    layout_to_dict,
)
from cargoscene.infrastructure.exporters.stl import StlSceneExporter

__all__ = [
    "SCHEMA_VERSION",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "safe_file_stem",
    "JsonSceneExporter",
    "StlSceneExporter",
    "layout_to_dict",
]
