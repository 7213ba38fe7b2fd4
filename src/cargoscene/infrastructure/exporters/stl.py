"""STL format exporter for scene layouts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from cargoscene.infrastructure.exporters.base import ExporterRegistry
from cargoscene.infrastructure.stl_exporter import StlExporter as StlExporterImpl
from cargoscene.infrastructure.stl_exporter import StlMeshBuilder

if TYPE_CHECKING:
    from cargoscene.application.dtos import LayoutOutput


@ExporterRegistry.register("stl")
class StlSceneExporter:
    """Exports placed item boxes to STL for 3D viewers.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        include_container: bool = False,
    ) -> None:
        self._exporter = StlExporterImpl(
            mesh_builder=mesh_builder, include_container=include_container
        )

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Export the layout's boxes to an STL file.

        Raises:
            ValueError: If the output carries no layout.
        """
        if output.layout is None:
            raise ValueError("Cannot export STL: layout output has no scene")
        self._exporter.export_to_file(output.layout, path)

    def export_string(self, output: LayoutOutput) -> str:
        """STL is written as binary and has no string form.

        Raises:
            NotImplementedError: Always.
        """
        raise NotImplementedError(
            "STL format is binary and does not support string export. "
            "Use export() to write to a file instead."
        )


__all__ = ["StlSceneExporter", "StlExporterImpl", "StlMeshBuilder"]
