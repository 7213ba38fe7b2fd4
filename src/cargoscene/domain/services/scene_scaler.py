"""Real-to-scene scaling.

The container's longest edge is mapped to a fixed scene extent so that a
40-foot container and a 1-meter crate render at the same apparent size.
"""

from __future__ import annotations

from typing import Any

from ..value_objects import ScaleParams
from .normalization import parse_container

DEFAULT_TARGET_MAX = 8.0


def compute_scale(container: Any, target_max: float = DEFAULT_TARGET_MAX) -> ScaleParams:
    """Compute the uniform scene scale for a container.

    The container is normalized first, so a missing or non-positive
    dimension is replaced by its default before the longest edge is taken.

    Args:
        container: ContainerSpec, mapping or object with
            ``length``/``width``/``height``.
        target_max: Scene extent of the longest container edge.

    Returns:
        ScaleParams with ``scene_scale = target_max / max(L, W, H)``, or 1
        when the longest edge is 0.
    """
    spec = parse_container(container)
    max_dim = spec.max_dimension
    scene_scale = target_max / max_dim if max_dim > 0 else 1.0
    return ScaleParams(scene_scale=scene_scale, target_max=target_max)


class SceneScaler:
    """Computes ScaleParams with a configured target extent."""

    def __init__(self, target_max: float = DEFAULT_TARGET_MAX) -> None:
        self.target_max = target_max

    def compute_scale(self, container: Any) -> ScaleParams:
        return compute_scale(container, self.target_max)
