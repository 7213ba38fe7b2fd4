"""Application commands (use cases) for scene generation."""

from __future__ import annotations

import logging

from cargoscene.domain import SceneLayoutService

from .dtos import LayoutInput, LayoutOutput

logger = logging.getLogger(__name__)


class GenerateSceneCommand:
    """Command to lay out one container as a render-ready scene.

    The injected layout service is used when the input carries no scene
    configuration of its own; otherwise a service is built for the input's
    configuration so one command instance can serve requests with different
    settings.
    """

    def __init__(self, layout_service: SceneLayoutService | None = None) -> None:
        self.layout_service = layout_service or SceneLayoutService()

    def execute(self, layout_input: LayoutInput) -> LayoutOutput:
        """Execute the scene generation command.

        Args:
            layout_input: Container, items and optional scene configuration.

        Returns:
            LayoutOutput with the scene. Malformed container or item values
            do not fail the command; they are defaulted and listed in the
            scene's warnings.
        """
        service = self.layout_service
        if layout_input.config is not None and layout_input.config != service.config:
            service = SceneLayoutService(layout_input.config)

        try:
            layout = service.layout(layout_input.container, layout_input.items)
        except ValueError as e:
            logger.error("Scene layout failed: %s", e)
            return LayoutOutput(
                layout=None,
                container_name=layout_input.container_name,
                utilization=layout_input.utilization,
                errors=[str(e)],
            )

        logger.info(
            "Laid out %d of %d item instances (%s)",
            layout.placed_count,
            layout.requested_count,
            layout.mode.value,
        )
        return LayoutOutput(
            layout=layout,
            container_name=layout_input.container_name,
            utilization=layout_input.utilization,
        )
