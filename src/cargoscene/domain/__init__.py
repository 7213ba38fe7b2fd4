"""Domain layer - container geometry and layout logic."""

from .services import (
    PrecomputedPlacer,
    SceneConfig,
    SceneLayoutService,
    ShelfPacker,
    compute_scale,
    parse_position,
    place_items,
    scale_to_scene,
)
from .value_objects import (
    AnnotationGeometry,
    ContainerSpec,
    ItemSpec,
    OverlapPair,
    PlacedGeometry,
    PlacementMode,
    Point3,
    ScaleParams,
    SceneLayout,
    Size3,
)

__all__ = [
    "AnnotationGeometry",
    "ContainerSpec",
    "ItemSpec",
    "OverlapPair",
    "PlacedGeometry",
    "PlacementMode",
    "Point3",
    "PrecomputedPlacer",
    "ScaleParams",
    "SceneConfig",
    "SceneLayout",
    "SceneLayoutService",
    "ShelfPacker",
    "Size3",
    "compute_scale",
    "parse_position",
    "place_items",
    "scale_to_scene",
]
