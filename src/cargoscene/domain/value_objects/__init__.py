"""Value objects for the container scene domain.

This module provides immutable data types used throughout the layout
pipeline. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Real-unit geometry
from ._core_geometry import (
    ORIGIN,
    ContainerSpec,
    ItemSpec,
    Point3,
    Size3,
)

# Scene-space render primitives
from ._scene import (
    AnnotationGeometry,
    Axis,
    ContainerGeometry,
    GridGeometry,
    OverlapPair,
    PlacedGeometry,
    PlacementMode,
    ScaleParams,
    SceneLayout,
)

__all__ = [
    "ORIGIN",
    "AnnotationGeometry",
    "Axis",
    "ContainerGeometry",
    "ContainerSpec",
    "GridGeometry",
    "ItemSpec",
    "OverlapPair",
    "PlacedGeometry",
    "PlacementMode",
    "Point3",
    "ScaleParams",
    "SceneLayout",
    "Size3",
]
