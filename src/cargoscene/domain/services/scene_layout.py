"""Layout orchestration: one container in, one render-ready scene out.

A layout pass never raises for malformed data. Every default the pass
substitutes and every item it drops is listed in ``SceneLayout.warnings``
so callers can surface the corrections without handling exceptions.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..value_objects import (
    ContainerGeometry,
    ContainerSpec,
    GridGeometry,
    PlacedGeometry,
    Point3,
    ScaleParams,
    SceneLayout,
)
from .annotations import DimensionAnnotator
from .config import SceneConfig
from .normalization import (
    parse_container,
    parse_item,
    substituted_container_fields,
    substituted_dimension_fields,
)
from .overlap import OverlapDiagnostics
from .placement import select_placer
from .scene_scaler import compute_scale

logger = logging.getLogger(__name__)

__all__ = ["SceneLayoutService", "place_items", "scale_to_scene"]

DEFAULT_GRID_SIZE = 5.0


class SceneLayoutService:
    """Runs the full layout pipeline for a single container.

    Scale, normalize, place (projection or shelf packing), check overlaps,
    annotate. Each call is independent and deterministic.

    Attributes:
        config: Scene configuration shared by every stage.
    """

    def __init__(
        self,
        config: SceneConfig | None = None,
        diagnostics: OverlapDiagnostics | None = None,
        annotator: DimensionAnnotator | None = None,
    ) -> None:
        self.config = config or SceneConfig()
        self.diagnostics = diagnostics or OverlapDiagnostics()
        self.annotator = annotator or DimensionAnnotator(self.config)

    def layout(self, container: Any, items: Sequence[Any] | None = None) -> SceneLayout:
        """Lay out ``items`` in ``container``.

        Args:
            container: Container dimensions in meters, in any shape
                ``parse_container`` accepts.
            items: Raw items or ItemSpecs. When any carries a position the
                positions are projected; otherwise the shelf packer runs.

        Returns:
            SceneLayout with boxes, annotations and diagnostics.
        """
        warnings: list[str] = []
        spec = parse_container(container)
        for name in substituted_container_fields(container):
            warnings.append(
                f"Container {name} missing or invalid, using {getattr(spec, name):g} m"
            )

        scale = compute_scale(spec, self.config.target_max)
        parsed = [
            parse_item(item, i, self.config.default_dimension)
            for i, item in enumerate(items or ())
        ]
        for raw, item in zip(items or (), parsed):
            fields = substituted_dimension_fields(raw)
            if fields:
                warnings.append(
                    f"Item '{item.name}' {', '.join(fields)} missing or invalid, "
                    f"using {self.config.default_dimension:g} m"
                )
        placer = select_placer(parsed, self.config)
        logger.debug(
            "Laying out %d items in %.3f x %.3f x %.3f container (%s, scale %.4f)",
            len(parsed),
            spec.length,
            spec.width,
            spec.height,
            placer.mode.value,
            scale.scene_scale,
        )

        result = placer.place(spec, parsed, scale)
        warnings.extend(result.warnings)

        overlaps = self.diagnostics.find_overlaps(result.placements)
        warnings.extend(self.diagnostics.describe(result.placements, overlaps))

        return SceneLayout(
            container=spec,
            scale=scale,
            mode=placer.mode,
            boxes=result.placements,
            annotations=tuple(self.annotator.compute_annotations(spec, scale)),
            container_box=self.container_geometry(spec, scale),
            grid=self.grid_geometry(spec, scale) if self.config.show_grid else None,
            overlaps=tuple(overlaps),
            requested_count=result.requested_count,
            warnings=tuple(warnings),
        )

    def container_geometry(
        self, container: ContainerSpec, scale: ScaleParams
    ) -> ContainerGeometry:
        """Container render box standing on the floor, centered horizontally."""
        size = container.size.scaled(scale.scene_scale)
        return ContainerGeometry(center=Point3(0.0, size.height / 2, 0.0), size=size)

    def grid_geometry(self, container: ContainerSpec, scale: ScaleParams) -> GridGeometry:
        """Floor grid spanning the container's longer horizontal edge."""
        size = scale.to_scene(max(container.length, container.width))
        return GridGeometry(size=size or DEFAULT_GRID_SIZE)


def scale_to_scene(container: Any, config: SceneConfig | None = None) -> ScaleParams:
    """Scale parameters for a container, as consumed by a renderer."""
    config = config or SceneConfig()
    return compute_scale(container, config.target_max)


def place_items(
    container: Any,
    items: Sequence[Any],
    config: SceneConfig | None = None,
) -> list[PlacedGeometry]:
    """Placed boxes for a container, as consumed by a renderer.

    Selects the placer once from the shape of ``items`` and returns its
    boxes in output order.
    """
    config = config or SceneConfig()
    spec = parse_container(container)
    parsed = [parse_item(item, i, config.default_dimension) for i, item in enumerate(items)]
    placer = select_placer(parsed, config)
    scale = compute_scale(spec, config.target_max)
    return list(placer.place(spec, parsed, scale).placements)
