"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cargoscene.domain import SceneConfig

if TYPE_CHECKING:
    from cargoscene.application.commands import GenerateSceneCommand
    from cargoscene.domain.services import SceneLayoutService
    from cargoscene.infrastructure.exporters import ExportManager


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Centralizes service instantiation so the CLI and the web API share one
    wiring, and tests can swap in their own services with ``set_factory``.

    Attributes:
        config: Scene configuration used for the cached layout service.
    """

    config: SceneConfig = field(default_factory=SceneConfig)

    _layout_service: "SceneLayoutService | None" = field(
        default=None, init=False, repr=False
    )

    def get_layout_service(self) -> "SceneLayoutService":
        """Get or create the scene layout service."""
        if self._layout_service is None:
            from cargoscene.domain.services import SceneLayoutService

            self._layout_service = SceneLayoutService(self.config)
        return self._layout_service

    def create_generate_command(self) -> "GenerateSceneCommand":
        """Create a GenerateSceneCommand wired to the cached layout service."""
        from cargoscene.application.commands import GenerateSceneCommand

        return GenerateSceneCommand(layout_service=self.get_layout_service())

    def create_export_manager(self, output_dir) -> "ExportManager":
        """Create an ExportManager writing into ``output_dir``."""
        from cargoscene.infrastructure.exporters import ExportManager

        return ExportManager(output_dir)


_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
