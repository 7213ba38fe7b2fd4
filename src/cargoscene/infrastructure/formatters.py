"""Plain-text formatters for scene layouts."""

from __future__ import annotations

from cargoscene.application.dtos import LayoutOutput
from cargoscene.domain import SceneLayout


class PlacementTableFormatter:
    """Formats placed boxes as a table of real positions and sizes."""

    def format(self, layout: SceneLayout) -> str:
        if not layout.boxes:
            return "No items placed."

        lines = [
            "PLACEMENTS",
            "=" * 78,
            f"{'#':<5} {'Item':<24} {'Position (m)':<24} {'Size (m)':<24}",
            "-" * 78,
        ]
        for box in layout.boxes:
            pos = f"{box.position.x:.3f}, {box.position.y:.3f}, {box.position.z:.3f}"
            dims = box.dimensions
            size = f"{dims.length:.3f} x {dims.width:.3f} x {dims.height:.3f}"
            lines.append(f"{box.index:<5} {box.item_ref[:24]:<24} {pos:<24} {size:<24}")
        lines.append("=" * 78)
        return "\n".join(lines)


class SceneSummaryFormatter:
    """Formats a short scene summary with diagnostics."""

    def __init__(self, include_placements: bool = True) -> None:
        self._include_placements = include_placements
        self._table = PlacementTableFormatter()

    def format(self, output: LayoutOutput) -> str:
        layout = output.layout
        if layout is None:
            return "No scene generated."

        c = layout.container
        lines = [
            f"SCENE: {output.display_name}",
            "=" * 78,
            f"Container:    {c.length:g} x {c.width:g} x {c.height:g} m",
            f"Scene scale:  {layout.scale.scene_scale:.4f} "
            f"(longest edge = {layout.scale.target_max:g} units)",
            f"Placement:    {layout.mode.value}",
            f"Items:        {layout.placed_count} placed of "
            f"{layout.requested_count} requested",
            f"Utilization:  {layout.utilization:.1f}%",
        ]
        if output.utilization is not None:
            lines.append(f"Reported:     {output.utilization}")
        if layout.overlaps:
            lines.append(f"Overlaps:     {len(layout.overlaps)} pair(s)")

        if self._include_placements:
            lines.append("")
            lines.append(self._table.format(layout))

        if layout.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  - {warning}" for warning in layout.warnings)
        return "\n".join(lines)
