"""Scene layout configuration.

This module provides SceneConfig for customizing how a layout pass scales,
pads, packs and annotates a container scene.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PALETTE: tuple[str, ...] = (
    "#58A6FF",
    "#6BCB77",
    "#FFD93D",
    "#FF6B6B",
    "#9D5CFF",
    "#F0A500",
    "#4D96FF",
)


@dataclass(frozen=True)
class SceneConfig:
    """Configuration for the scene layout services.

    Attributes:
        target_max: Scene extent of the container's longest edge.
        visual_pad: Total shrinkage per item extent in meters (2 mm),
            half applied on each side so touching faces never coincide.
        min_render_size: Floor for a shrunk item extent in meters.
        default_dimension: Extent used for a missing or invalid item size.
        packing_gap: Gap between neighbors placed by the shelf packer.
        max_instances: Most item instances the shelf packer expands.
        show_grid: Whether to emit a floor grid.
        unit_label: Suffix of dimension label text.
        label_precision: Decimal places of dimension label text.
        marker_offset: Scene distance of marker lines outside the container.
        label_offset: Scene distance of label anchors outside the container.
        palette: Colors cycled over pre-computed items.
        packed_color: Color of shelf-packed items.
    """

    target_max: float = 8.0
    visual_pad: float = 0.002
    min_render_size: float = 0.0001
    default_dimension: float = 0.001
    packing_gap: float = 0.01
    max_instances: int = 1200
    show_grid: bool = False
    unit_label: str = "m"
    label_precision: int = 2
    marker_offset: float = 0.1
    label_offset: float = 0.15
    palette: tuple[str, ...] = DEFAULT_PALETTE
    packed_color: str = "#9DD3FF"

    def __post_init__(self) -> None:
        if self.target_max <= 0:
            raise ValueError("target_max must be positive")
        if self.visual_pad < 0:
            raise ValueError("visual_pad must be non-negative")
        if self.min_render_size <= 0:
            raise ValueError("min_render_size must be positive")
        if self.default_dimension <= 0:
            raise ValueError("default_dimension must be positive")
        if self.packing_gap < 0:
            raise ValueError("packing_gap must be non-negative")
        if self.max_instances < 1:
            raise ValueError("max_instances must be at least 1")
        if self.label_precision < 0:
            raise ValueError("label_precision must be non-negative")
        if not self.palette:
            raise ValueError("palette must contain at least one color")
