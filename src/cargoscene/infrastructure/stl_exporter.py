"""STL export functionality using numpy-stl."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from stl import mesh

from cargoscene.domain import PlacedGeometry, Point3, SceneLayout, Size3

logger = logging.getLogger(__name__)

# 12 triangles (2 per face) over the corner order of ``box_vertices``,
# wound counter-clockwise seen from outside so normals point outward.
BOX_TRIANGLES: tuple[tuple[int, int, int], ...] = (
    # Floor (y = min)
    (0, 1, 2),
    (0, 2, 3),
    # Top (y = max)
    (4, 6, 5),
    (4, 7, 6),
    # Front (z = min)
    (0, 5, 1),
    (0, 4, 5),
    # Back (z = max)
    (2, 7, 3),
    (2, 6, 7),
    # Left (x = min)
    (0, 7, 4),
    (0, 3, 7),
    # Right (x = max)
    (1, 6, 2),
    (1, 5, 6),
)


def box_vertices(center: Point3, size: Size3) -> np.ndarray:
    """Return the 8 corners of a scene box as an (8, 3) array.

    Scene coordinates are already Y-up: x along the container length, y
    vertical, z along the width.
    """
    hx, hy, hz = size.length / 2, size.height / 2, size.width / 2
    x0, x1 = center.x - hx, center.x + hx
    y0, y1 = center.y - hy, center.y + hy
    z0, z1 = center.z - hz, center.z + hz
    return np.array(
        [
            (x0, y0, z0),
            (x1, y0, z0),
            (x1, y0, z1),
            (x0, y0, z1),
            (x0, y1, z0),
            (x1, y1, z0),
            (x1, y1, z1),
            (x0, y1, z1),
        ],
        dtype=np.float64,
    )


class StlMeshBuilder:
    """Builds STL meshes from scene boxes.

    No axis swap is needed: scene space already uses the Y-up convention
    most STL viewers expect.
    """

    def build_box_mesh(self, center: Point3, size: Size3) -> mesh.Mesh:
        """Create a 12-triangle mesh for one axis-aligned box."""
        vertices = box_vertices(center, size)
        box_mesh = mesh.Mesh(np.zeros(len(BOX_TRIANGLES), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(BOX_TRIANGLES):
            box_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]
        box_mesh.update_normals()
        return box_mesh

    def build_placed_mesh(self, box: PlacedGeometry) -> mesh.Mesh:
        return self.build_box_mesh(box.center, box.scene_size)

    def combine_meshes(self, meshes: list[mesh.Mesh]) -> mesh.Mesh:
        """Combine multiple meshes into a single mesh."""
        if not meshes:
            return mesh.Mesh(np.zeros(0, dtype=mesh.Mesh.dtype))
        return mesh.Mesh(np.concatenate([m.data for m in meshes]))


class StlExporter:
    """Writes a scene layout to an STL file.

    Attributes:
        include_container: Also emit the container box as a closed mesh.
    """

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        include_container: bool = False,
    ) -> None:
        self.mesh_builder = mesh_builder or StlMeshBuilder()
        self.include_container = include_container

    def build_scene_mesh(self, layout: SceneLayout) -> mesh.Mesh:
        """Combine every placed box (and optionally the container) into one mesh."""
        meshes = [self.mesh_builder.build_placed_mesh(box) for box in layout.boxes]
        if self.include_container:
            container = layout.container_box
            meshes.append(self.mesh_builder.build_box_mesh(container.center, container.size))
        return self.mesh_builder.combine_meshes(meshes)

    def export_to_file(self, layout: SceneLayout, filepath: Path) -> None:
        """Export a scene layout to an STL file."""
        scene_mesh = self.build_scene_mesh(layout)
        scene_mesh.save(str(filepath))
        logger.info(f"Wrote {len(scene_mesh.vectors)} triangles to {filepath}")
