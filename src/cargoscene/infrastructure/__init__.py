"""Infrastructure layer - file exporters and text formatters."""

from cargoscene.infrastructure.exporters import (
    ExportManager,
    ExporterRegistry,
    JsonSceneExporter,
    StlSceneExporter,
    layout_to_dict,
)
from cargoscene.infrastructure.formatters import (
    PlacementTableFormatter,
    SceneSummaryFormatter,
)
from cargoscene.infrastructure.stl_exporter import StlExporter, StlMeshBuilder

__all__ = [
    "ExportManager",
    "ExporterRegistry",
    "JsonSceneExporter",
    "PlacementTableFormatter",
    "SceneSummaryFormatter",
    "StlExporter",
    "StlMeshBuilder",
    "StlSceneExporter",
    "layout_to_dict",
]
