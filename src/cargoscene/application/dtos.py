"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cargoscene.domain import SceneConfig, SceneLayout


@dataclass
class LayoutInput:
    """Input DTO for one layout pass.

    ``container`` and ``items`` stay loosely typed; the domain normalizer
    turns them into value objects.

    Attributes:
        container: Container dimensions in meters.
        items: Raw items (packed items with positions, or item specs with
            quantities).
        config: Scene configuration; defaults when omitted.
        container_name: Display name, used for export file names.
        utilization: Utilization reported by the packing engine, if any.
    """

    container: Any
    items: list[Any] = field(default_factory=list)
    config: SceneConfig | None = None
    container_name: str | None = None
    utilization: float | str | None = None


@dataclass
class LayoutOutput:
    """Output DTO containing the laid-out scene.

    Attributes:
        layout: The scene produced by the domain layer.
        container_name: Display name carried over from the input.
        utilization: Upstream utilization carried over from the input.
        errors: Errors that prevented a layout (empty on success).
    """

    layout: SceneLayout | None
    container_name: str | None = None
    utilization: float | str | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when a layout was produced without errors."""
        return self.layout is not None and not self.errors

    @property
    def warnings(self) -> list[str]:
        """Warnings reported by the layout pass."""
        if self.layout is None:
            return []
        return list(self.layout.warnings)

    @property
    def display_name(self) -> str:
        """Container name for titles and file names."""
        return self.container_name or "container"
