"""Post-placement overlap diagnostics.

Overlaps are reported, never corrected and never treated as failures:
upstream packing data is usually physically valid, and apparent overlap can
come from floating-point boundary cases.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..value_objects import OverlapPair, PlacedGeometry, Size3

logger = logging.getLogger(__name__)

__all__ = ["OverlapDiagnostics", "find_overlaps"]


def _axis_overlap(min_a: float, max_a: float, min_b: float, max_b: float) -> float:
    return min(max_a, max_b) - max(min_a, min_b)


def find_overlaps(placed: Sequence[PlacedGeometry]) -> list[OverlapPair]:
    """Find every pair of boxes whose scene-space AABBs intersect.

    Pairwise O(n^2) test, fine for item counts in the low hundreds. Boxes
    that merely touch (zero extent on some axis) are not reported.

    Args:
        placed: Placed boxes in output order.

    Returns:
        OverlapPairs ordered by ``(first, second)`` with positive overlap on
        all three axes.
    """
    bounds = [(box.scene_min, box.scene_max) for box in placed]
    pairs: list[OverlapPair] = []
    for i in range(len(bounds)):
        min_a, max_a = bounds[i]
        for j in range(i + 1, len(bounds)):
            min_b, max_b = bounds[j]
            dx = _axis_overlap(min_a.x, max_a.x, min_b.x, max_b.x)
            if dx <= 0:
                continue
            dy = _axis_overlap(min_a.y, max_a.y, min_b.y, max_b.y)
            if dy <= 0:
                continue
            dz = _axis_overlap(min_a.z, max_a.z, min_b.z, max_b.z)
            if dz <= 0:
                continue
            pairs.append(OverlapPair(first=i, second=j, extent=Size3(dx, dz, dy)))

    if pairs:
        logger.debug("Overlap check found %d intersecting pairs", len(pairs))
    return pairs


class OverlapDiagnostics:
    """Advisory AABB intersection check over a placed layout."""

    def find_overlaps(self, placed: Sequence[PlacedGeometry]) -> list[OverlapPair]:
        return find_overlaps(placed)

    def describe(
        self, placed: Sequence[PlacedGeometry], pairs: Sequence[OverlapPair]
    ) -> list[str]:
        """Render overlap pairs as warning lines naming both items."""
        return [
            f"Overlap between '{placed[p.first].item_ref}' and "
            f"'{placed[p.second].item_ref}' ({p.volume:.4g} cubic scene units)"
            for p in pairs
        ]
