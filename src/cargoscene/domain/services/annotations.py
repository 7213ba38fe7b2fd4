"""Dimension markers for the container's three axes."""

from __future__ import annotations

from typing import Any

from ..value_objects import AnnotationGeometry, Axis, Point3, ScaleParams
from .config import SceneConfig
from .normalization import parse_container

LENGTH_COLOR = "#FF0000"
WIDTH_COLOR = "#00FF00"
HEIGHT_COLOR = "#0000FF"


def format_measurement(value: float, unit: str = "m", precision: int = 2) -> str:
    """Format a real-world measurement for a label, e.g. ``"2.40 m"``."""
    return f"{value:.{precision}f} {unit}"


def compute_annotations(
    container: Any,
    scale: ScaleParams,
    config: SceneConfig | None = None,
) -> list[AnnotationGeometry]:
    """Compute marker segments and label anchors for a container.

    Markers sit ``marker_offset`` scene units outside the container's
    bounding box, labels ``label_offset`` units out. The length marker runs
    along X at the +Z face, the width marker along Z at the +X face, and the
    height marker rises at the +X/+Z corner.

    Args:
        container: Container in any shape ``parse_container`` accepts.
        scale: Scene scale for the container.
        config: Offsets and label formatting; defaults when omitted.

    Returns:
        Length, width and height annotations, in that order.
    """
    config = config or SceneConfig()
    spec = parse_container(container)
    s = scale.scene_scale
    half_l = spec.length * s / 2
    half_w = spec.width * s / 2
    full_h = spec.height * s
    marker = config.marker_offset
    label = config.label_offset

    def text(value: float) -> str:
        return format_measurement(value, config.unit_label, config.label_precision)

    return [
        AnnotationGeometry(
            axis=Axis.LENGTH,
            start=Point3(-half_l, 0.0, half_w + marker),
            end=Point3(half_l, 0.0, half_w + marker),
            label=text(spec.length),
            label_anchor=Point3(0.0, 0.0, half_w + label),
            color=LENGTH_COLOR,
        ),
        AnnotationGeometry(
            axis=Axis.WIDTH,
            start=Point3(half_l + marker, 0.0, -half_w),
            end=Point3(half_l + marker, 0.0, half_w),
            label=text(spec.width),
            label_anchor=Point3(half_l + label, 0.0, 0.0),
            color=WIDTH_COLOR,
        ),
        AnnotationGeometry(
            axis=Axis.HEIGHT,
            start=Point3(half_l + marker, 0.0, half_w + marker),
            end=Point3(half_l + marker, full_h, half_w + marker),
            label=text(spec.height),
            label_anchor=Point3(half_l + label, full_h / 2, half_w + label),
            color=HEIGHT_COLOR,
        ),
    ]


class DimensionAnnotator:
    """Produces container dimension annotations with a fixed configuration."""

    def __init__(self, config: SceneConfig | None = None) -> None:
        self.config = config or SceneConfig()

    def compute_annotations(
        self, container: Any, scale: ScaleParams
    ) -> list[AnnotationGeometry]:
        return compute_annotations(container, scale, self.config)
