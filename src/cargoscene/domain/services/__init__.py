"""Domain services for container scene layout.

This package provides the layout pipeline:
- Input normalization (positions, dimensions, containers, quantities)
- Real-to-scene scaling
- Placement by projection of pre-computed positions or by shelf packing
- Overlap diagnostics and dimension annotations
"""

from .annotations import DimensionAnnotator, compute_annotations, format_measurement
from .config import DEFAULT_PALETTE, SceneConfig
from .normalization import (
    coerce_number,
    has_position,
    parse_container,
    parse_dimensions,
    parse_item,
    parse_position,
    parse_quantity,
    substituted_container_fields,
    substituted_dimension_fields,
)
from .overlap import OverlapDiagnostics, find_overlaps
from .placement import (
    Placer,
    PlacementResult,
    PrecomputedPlacer,
    ShelfPacker,
    select_placer,
)
from .scene_layout import SceneLayoutService, place_items, scale_to_scene
from .scene_scaler import SceneScaler, compute_scale

__all__ = [
    "DEFAULT_PALETTE",
    "DimensionAnnotator",
    "OverlapDiagnostics",
    "Placer",
    "PlacementResult",
    "PrecomputedPlacer",
    "SceneConfig",
    "SceneLayoutService",
    "SceneScaler",
    "ShelfPacker",
    "coerce_number",
    "compute_annotations",
    "compute_scale",
    "find_overlaps",
    "format_measurement",
    "has_position",
    "parse_container",
    "parse_dimensions",
    "parse_item",
    "parse_position",
    "parse_quantity",
    "place_items",
    "scale_to_scene",
    "select_placer",
    "substituted_container_fields",
    "substituted_dimension_fields",
]
