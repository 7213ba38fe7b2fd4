"""Adapter to convert validated requests into domain config and DTOs.

Settings map one-to-one onto SceneConfig fields. The container and item
payloads are handed over as plain dicts so the domain normalizer sees the
same shapes it would receive from any other caller.
"""

from cargoscene.application.config.schemas import (
    LayoutRequestSchema,
    SceneSettingsSchema,
)
from cargoscene.application.dtos import LayoutInput
from cargoscene.domain import SceneConfig


def config_to_scene_config(settings: SceneSettingsSchema) -> SceneConfig:
    """Convert scene settings to a SceneConfig.

    Args:
        settings: Validated scene settings.

    Returns:
        SceneConfig with the palette left at its default when not given.
    """
    values = settings.model_dump(exclude={"palette"})
    if settings.palette is not None:
        values["palette"] = tuple(settings.palette)
    return SceneConfig(**values)


def request_to_layout_input(request: LayoutRequestSchema) -> LayoutInput:
    """Convert a validated layout request to a LayoutInput DTO."""
    return LayoutInput(
        container=request.container.model_dump(),
        items=[item.to_raw() for item in request.items],
        config=config_to_scene_config(request.settings),
        container_name=request.container_name,
        utilization=request.utilization,
    )
