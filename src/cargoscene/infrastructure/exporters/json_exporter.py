"""JSON exporter for render-ready scenes.

The document carries everything a renderer needs: scale, container box,
item boxes in scene units, dimension markers, optional grid, plus the
diagnostics of the layout pass. The web API returns the same structure.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from cargoscene.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from cargoscene.application.dtos import LayoutOutput
    from cargoscene.domain.value_objects import Point3, Size3


logger = logging.getLogger(__name__)

# Current schema version for scene JSON output
SCHEMA_VERSION = "1.0"


def _point(p: Point3) -> list[float]:
    return [p.x, p.y, p.z]


def _size(s: Size3) -> dict[str, float]:
    return {"length": s.length, "width": s.width, "height": s.height}


def layout_to_dict(output: LayoutOutput) -> dict[str, Any]:
    """Convert a layout output to a JSON-compatible dictionary.

    Points are ``[x, y, z]`` lists with x along the container length, y
    vertical and z along the width.
    """
    layout = output.layout
    data: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "container_name": output.container_name,
        "upstream_utilization": output.utilization,
        "errors": list(output.errors),
    }
    if layout is None:
        return data

    data.update(
        {
            "mode": layout.mode.value,
            "container": _size(layout.container.size),
            "scale": {
                "scene_scale": layout.scale.scene_scale,
                "target_max": layout.scale.target_max,
            },
            "container_box": {
                "center": _point(layout.container_box.center),
                "size": _size(layout.container_box.size),
                "color": layout.container_box.color,
                "opacity": layout.container_box.opacity,
            },
            "boxes": [
                {
                    "index": box.index,
                    "name": box.item_ref,
                    "position": _point(box.position),
                    "dimensions": _size(box.dimensions),
                    "center": _point(box.center),
                    "size": _size(box.scene_size),
                    "color": box.color,
                }
                for box in layout.boxes
            ],
            "annotations": [
                {
                    "axis": a.axis.value,
                    "start": _point(a.start),
                    "end": _point(a.end),
                    "label": a.label,
                    "label_anchor": _point(a.label_anchor),
                    "color": a.color,
                }
                for a in layout.annotations
            ],
            "grid": (
                {
                    "size": layout.grid.size,
                    "divisions": layout.grid.divisions,
                    "elevation": layout.grid.elevation,
                }
                if layout.grid is not None
                else None
            ),
            "overlaps": [
                {
                    "first": pair.first,
                    "second": pair.second,
                    "extent": _size(pair.extent),
                    "volume": pair.volume,
                }
                for pair in layout.overlaps
            ],
            "summary": {
                "requested": layout.requested_count,
                "placed": layout.placed_count,
                "dropped": layout.dropped_count,
                "utilization": round(layout.utilization, 2),
            },
            "warnings": list(layout.warnings),
        }
    )
    return data


@ExporterRegistry.register("json")
class JsonSceneExporter:
    """Exports the scene as a JSON document.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: LayoutOutput, path: Path) -> None:
        """Write the scene JSON to ``path``."""
        path.write_text(self.export_string(output))
        logger.info(f"Exported scene JSON to {path}")

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(layout_to_dict(output), indent=self.indent, default=str)
