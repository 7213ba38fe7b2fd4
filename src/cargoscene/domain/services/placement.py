"""Item placement: projection of pre-computed positions and shelf packing.

Two placers share one contract. ``PrecomputedPlacer`` takes the positions an
upstream packing engine already computed, clamps them into the container and
projects them into scene space. ``ShelfPacker`` is the fallback used when no
item carries a position: a single-pass, first-fit row heuristic on the
container floor.

Scene coordinates put the container floor at Y = 0 and center the container
on the horizontal plane, so for each item

    x = (pos_x + pad/2 + render_l/2 - L/2) * scale
    y = (pos_y + pad/2 + render_h/2) * scale
    z = (pos_z + pad/2 + render_w/2 - W/2) * scale
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

from ..value_objects import (
    ORIGIN,
    ContainerSpec,
    ItemSpec,
    PlacedGeometry,
    PlacementMode,
    Point3,
    ScaleParams,
    Size3,
)
from .config import SceneConfig
from .normalization import has_position, parse_container, parse_item
from .scene_scaler import compute_scale

logger = logging.getLogger(__name__)

__all__ = [
    "Placer",
    "PlacementResult",
    "PrecomputedPlacer",
    "ShelfPacker",
    "select_placer",
]


@dataclass(frozen=True)
class PlacementResult:
    """Boxes produced by a placer plus what it had to drop or correct.

    Attributes:
        placements: Placed boxes in output order.
        requested_count: Item instances the caller asked for.
        warnings: Human-readable notes on clamped or dropped items.
    """

    placements: tuple[PlacedGeometry, ...]
    requested_count: int
    warnings: tuple[str, ...] = ()

    @property
    def dropped_count(self) -> int:
        """Instances that were requested but not placed."""
        return max(0, self.requested_count - len(self.placements))


@runtime_checkable
class Placer(Protocol):
    """Produces scene transforms for the items of one layout pass."""

    mode: PlacementMode

    def place(
        self,
        container: ContainerSpec,
        items: Sequence[ItemSpec],
        scale: ScaleParams,
    ) -> PlacementResult:
        """Place ``items`` in ``container`` using ``scale``."""
        ...


def _build_geometry(
    container: ContainerSpec,
    dimensions: Size3,
    position: Point3,
    scale: ScaleParams,
    config: SceneConfig,
    *,
    name: str,
    index: int,
    color: str,
) -> PlacedGeometry:
    """Shrink a real box by the visual pad and project it into scene space."""
    pad = config.visual_pad
    floor = config.min_render_size
    render = Size3(
        max(floor, dimensions.length - pad),
        max(floor, dimensions.width - pad),
        max(floor, dimensions.height - pad),
    )
    half_pad = pad / 2
    s = scale.scene_scale
    center = Point3(
        (position.x + half_pad + render.length / 2 - container.length / 2) * s,
        (position.y + half_pad + render.height / 2) * s,
        (position.z + half_pad + render.width / 2 - container.width / 2) * s,
    )
    return PlacedGeometry(
        item_ref=name,
        index=index,
        position=position,
        dimensions=dimensions,
        center=center,
        render_size=render,
        scene_size=render.scaled(s),
        color=color,
    )


def _clamp(value: float, upper: float) -> float:
    # Lower bound wins when the item is larger than the container.
    return max(0.0, min(value, upper))


class PrecomputedPlacer:
    """Projects pre-computed item positions into the scene.

    Out-of-range positions are corrected, never rejected: each axis is
    clamped to ``[0, container_dim - item_dim]`` so the item's real bounding
    box stays inside the container.
    """

    mode = PlacementMode.PRECOMPUTED

    def __init__(self, config: SceneConfig | None = None) -> None:
        self.config = config or SceneConfig()

    def project(
        self,
        container: Any,
        item: Any,
        scale: ScaleParams | None = None,
        index: int = 0,
    ) -> PlacedGeometry:
        """Clamp one item into the container and project it.

        Args:
            container: Container in any shape ``parse_container`` accepts.
            item: ItemSpec or raw item with ``dimensions`` and ``position``.
            scale: Scene scale; computed from the container when omitted.
            index: Output index, also selects the palette color.

        Returns:
            PlacedGeometry for the clamped item.
        """
        spec = parse_container(container)
        item_spec = parse_item(item, index, self.config.default_dimension)
        if scale is None:
            scale = compute_scale(spec, self.config.target_max)
        raw = item_spec.position or ORIGIN
        dims = item_spec.dimensions
        clamped = Point3(
            _clamp(raw.x, spec.length - dims.length),
            _clamp(raw.y, spec.height - dims.height),
            _clamp(raw.z, spec.width - dims.width),
        )
        palette = self.config.palette
        return _build_geometry(
            spec,
            dims,
            clamped,
            scale,
            self.config,
            name=item_spec.name,
            index=index,
            color=palette[index % len(palette)],
        )

    def place(
        self,
        container: ContainerSpec,
        items: Sequence[ItemSpec],
        scale: ScaleParams,
    ) -> PlacementResult:
        placements: list[PlacedGeometry] = []
        clamped_names: list[str] = []
        oversized_names: list[str] = []

        for index, item in enumerate(items):
            placed = self.project(container, item, scale, index)
            placements.append(placed)
            if placed.position != (item.position or ORIGIN):
                clamped_names.append(item.name)
            if (
                item.dimensions.length > container.length
                or item.dimensions.width > container.width
                or item.dimensions.height > container.height
            ):
                oversized_names.append(item.name)

        warnings: list[str] = []
        if clamped_names:
            logger.debug("Clamped %d item positions into container", len(clamped_names))
            warnings.append(
                f"Clamped {len(clamped_names)} item position(s) into the container: "
                + ", ".join(clamped_names)
            )
        if oversized_names:
            warnings.append(
                f"{len(oversized_names)} item(s) larger than the container: "
                + ", ".join(oversized_names)
            )
        return PlacementResult(
            placements=tuple(placements),
            requested_count=len(items),
            warnings=tuple(warnings),
        )


@dataclass
class _RowCursor:
    """Internal cursor state for the shelf packer.

    Attributes:
        along_length: Start of the next item within the current row.
        along_width: Start of the current row.
        row_max_width: Widest item placed on the current row so far.
    """

    along_length: float = 0.0
    along_width: float = 0.0
    row_max_width: float = 0.0
    placed: list[PlacedGeometry] = field(default_factory=list)

    def wrap(self, gap: float) -> None:
        """Start a new row beside the current one."""
        self.along_length = 0.0
        self.along_width += self.row_max_width + gap
        self.row_max_width = 0.0


class ShelfPacker:
    """Fallback first-fit shelf heuristic on the container floor.

    Instances are placed left to right along the container length. When the
    next instance does not fit the current row, a new row is started beside
    it along the width. When the new row would overflow the width, packing
    stops: the remaining instances are dropped, never retried or reordered.

    Height stacking is not modeled; every item stands on the floor. The
    packer only guarantees non-overlap on the floor plane and that every
    footprint stays within the container length and width.
    """

    mode = PlacementMode.SHELF

    def __init__(self, config: SceneConfig | None = None) -> None:
        self.config = config or SceneConfig()

    def pack(
        self,
        container: Any,
        items: Sequence[Any],
        scale: ScaleParams | None = None,
    ) -> list[PlacedGeometry]:
        """Pack raw or parsed items and return the placed boxes.

        Args:
            container: Container in any shape ``parse_container`` accepts.
            items: ItemSpecs or raw items with dimensions and ``quantity``.
            scale: Scene scale; computed from the container when omitted.

        Returns:
            Placed boxes in packing order. Instances that did not fit are
            omitted.
        """
        spec = parse_container(container)
        parsed = [
            parse_item(item, i, self.config.default_dimension)
            for i, item in enumerate(items)
        ]
        if scale is None:
            scale = compute_scale(spec, self.config.target_max)
        return list(self.place(spec, parsed, scale).placements)

    def place(
        self,
        container: ContainerSpec,
        items: Sequence[ItemSpec],
        scale: ScaleParams,
    ) -> PlacementResult:
        requested = sum(item.quantity for item in items)
        instances = list(islice(self._expand_items(items), self.config.max_instances))
        gap = self.config.packing_gap
        cursor = _RowCursor()
        warnings: list[str] = []

        logger.debug(
            "Shelf packing %d instances into %.3f x %.3f floor",
            len(instances),
            container.length,
            container.width,
        )

        if requested > len(instances):
            warnings.append(
                f"Only the first {len(instances)} of {requested} instances were "
                f"considered (max_instances={self.config.max_instances})"
            )

        for name, dims in instances:
            if dims.length > container.length:
                warnings.append(
                    f"Packing stopped at '{name}': longer than the container "
                    f"({dims.length:g} > {container.length:g})"
                )
                break
            if cursor.along_length + dims.length > container.length:
                cursor.wrap(gap)
            if cursor.along_width + dims.width > container.width:
                warnings.append(
                    f"Packing stopped at '{name}': no room for another row"
                )
                break

            cursor.placed.append(
                _build_geometry(
                    container,
                    dims,
                    Point3(cursor.along_length, 0.0, cursor.along_width),
                    scale,
                    self.config,
                    name=name,
                    index=len(cursor.placed),
                    color=self.config.packed_color,
                )
            )
            cursor.along_length += dims.length + gap
            cursor.row_max_width = max(cursor.row_max_width, dims.width)

        dropped = requested - len(cursor.placed)
        if dropped:
            logger.info(
                "Shelf packer placed %d of %d instances", len(cursor.placed), requested
            )
        return PlacementResult(
            placements=tuple(cursor.placed),
            requested_count=requested,
            warnings=tuple(warnings),
        )

    def _expand_items(self, items: Sequence[ItemSpec]) -> Iterator[tuple[str, Size3]]:
        """Yield ``(label, dimensions)`` per instance, in input order.

        Labels get a ``#n`` suffix when an item has quantity > 1.
        """
        for item in items:
            for i in range(item.quantity):
                label = item.name if item.quantity == 1 else f"{item.name} #{i + 1}"
                yield label, item.dimensions


def select_placer(items: Sequence[Any], config: SceneConfig | None = None) -> Placer:
    """Choose the placer for one invocation from the shape of ``items``.

    Pre-computed projection is used when any item carries a position; items
    without one are then projected from the origin. Otherwise the shelf
    packer lays out every item.
    """
    if any(has_position(item) for item in items):
        return PrecomputedPlacer(config)
    return ShelfPacker(config)
