"""Scene-space render primitives produced by a layout pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._core_geometry import ContainerSpec, Point3, Size3


class Axis(str, Enum):
    """Container axis a dimension marker measures."""

    LENGTH = "length"
    WIDTH = "width"
    HEIGHT = "height"


class PlacementMode(str, Enum):
    """Which placer produced the item transforms of a layout."""

    PRECOMPUTED = "precomputed"
    SHELF = "shelf"


@dataclass(frozen=True)
class ScaleParams:
    """Uniform real-to-scene scale.

    Attributes:
        scene_scale: Scene units per meter.
        target_max: Scene extent of the container's longest edge.
    """

    scene_scale: float
    target_max: float

    def to_scene(self, value: float) -> float:
        """Convert a real length to scene units."""
        return value * self.scene_scale


@dataclass(frozen=True)
class PlacedGeometry:
    """A render-ready item box.

    Attributes:
        item_ref: Name of the source item.
        index: Position of this box in the layout output.
        position: Clamped min corner in real units.
        dimensions: Real item size.
        center: Box center in scene units.
        render_size: Real size shrunk by the visual pad.
        scene_size: ``render_size`` in scene units.
        color: Hex color hint for the renderer.
    """

    item_ref: str
    index: int
    position: Point3
    dimensions: Size3
    center: Point3
    render_size: Size3
    scene_size: Size3
    color: str

    @property
    def scene_min(self) -> Point3:
        """Minimum corner of the rendered box in scene units."""
        return Point3(
            self.center.x - self.scene_size.length / 2,
            self.center.y - self.scene_size.height / 2,
            self.center.z - self.scene_size.width / 2,
        )

    @property
    def scene_max(self) -> Point3:
        """Maximum corner of the rendered box in scene units."""
        return Point3(
            self.center.x + self.scene_size.length / 2,
            self.center.y + self.scene_size.height / 2,
            self.center.z + self.scene_size.width / 2,
        )

    @property
    def right_edge(self) -> float:
        """Real X coordinate of the far length edge."""
        return self.position.x + self.dimensions.length

    @property
    def back_edge(self) -> float:
        """Real Z coordinate of the far width edge."""
        return self.position.z + self.dimensions.width

    @property
    def top_edge(self) -> float:
        """Real Y coordinate of the top face."""
        return self.position.y + self.dimensions.height


@dataclass(frozen=True)
class AnnotationGeometry:
    """Dimension marker line plus its label anchor, in scene units."""

    axis: Axis
    start: Point3
    end: Point3
    label: str
    label_anchor: Point3
    color: str


@dataclass(frozen=True)
class OverlapPair:
    """Two placed boxes whose scene-space AABBs intersect.

    Attributes:
        first: Index of the first box.
        second: Index of the second box (always greater than ``first``).
        extent: Overlap along each axis in scene units.
    """

    first: int
    second: int
    extent: Size3

    def __post_init__(self) -> None:
        if self.second <= self.first:
            raise ValueError("second index must be greater than first")

    @property
    def volume(self) -> float:
        """Overlap volume in cubic scene units."""
        return self.extent.volume


@dataclass(frozen=True)
class ContainerGeometry:
    """Translucent container box, floor at scene Y = 0."""

    center: Point3
    size: Size3
    color: str = "#63ABF7"
    opacity: float = 0.25


@dataclass(frozen=True)
class GridGeometry:
    """Floor grid helper."""

    size: float
    divisions: int = 10
    elevation: float = 0.001


@dataclass(frozen=True)
class SceneLayout:
    """Complete output of one layout pass.

    Attributes:
        container: Container dimensions after defaulting, in meters.
        scale: Real-to-scene scale.
        mode: Placer that produced ``boxes``.
        boxes: Placed item boxes in output order.
        annotations: Length, width and height markers.
        container_box: Container render box.
        grid: Floor grid, or None when disabled.
        overlaps: Advisory overlap pairs between ``boxes``.
        requested_count: Item instances requested by the caller.
        warnings: Every substitution or drop made during the pass.
    """

    container: ContainerSpec
    scale: ScaleParams
    mode: PlacementMode
    boxes: tuple[PlacedGeometry, ...]
    annotations: tuple[AnnotationGeometry, ...]
    container_box: ContainerGeometry
    grid: GridGeometry | None = None
    overlaps: tuple[OverlapPair, ...] = ()
    requested_count: int = 0
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def placed_count(self) -> int:
        """Number of boxes placed."""
        return len(self.boxes)

    @property
    def dropped_count(self) -> int:
        """Requested instances that did not make it into the layout."""
        return max(0, self.requested_count - len(self.boxes))

    @property
    def has_overlaps(self) -> bool:
        """True when the diagnostic pass found intersecting boxes."""
        return bool(self.overlaps)

    @property
    def utilization(self) -> float:
        """Share of container volume taken by placed items, in percent."""
        volume = self.container.volume
        if volume <= 0:
            return 0.0
        used = sum(box.dimensions.volume for box in self.boxes)
        return used / volume * 100
