"""Pydantic schemas for layout request files.

Two kinds of data live in a request and they are validated differently:

- Scene settings are configuration. They are validated strictly (unknown
  fields rejected, ranges enforced) because a wrong setting is a mistake
  worth reporting.
- Container and item data come from upstream packing engines. Their numeric
  fields are typed ``Any`` so that malformed values pass through to the
  domain normalizer, which substitutes defaults instead of failing.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

# Supported schema versions for request files
# Version 1.0: Container, items and scene settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _check_color(value: str) -> str:
    if not _HEX_COLOR.match(value):
        raise ValueError(f"'{value}' is not a hex color like #58A6FF")
    return value


class SceneSettingsSchema(BaseModel):
    """Scene settings for a layout pass.

    Attributes:
        target_max: Scene extent of the container's longest edge (0 to 1000].
        visual_pad: Total shrinkage per item extent in meters.
        packing_gap: Gap between shelf-packed neighbors in meters.
        max_instances: Most item instances the shelf packer expands.
        show_grid: Emit a floor grid.
        unit_label: Suffix of dimension labels.
        label_precision: Decimal places of dimension labels.
        palette: Colors cycled over pre-computed items.
        packed_color: Color of shelf-packed items.
    """

    model_config = ConfigDict(extra="forbid")

    target_max: float = Field(default=8.0, gt=0, le=1000.0)
    visual_pad: float = Field(default=0.002, ge=0, le=0.1)
    packing_gap: float = Field(default=0.01, ge=0, le=1.0)
    max_instances: int = Field(default=1200, ge=1, le=100_000)
    show_grid: bool = False
    unit_label: str = Field(default="m", min_length=1, max_length=8)
    label_precision: int = Field(default=2, ge=0, le=6)
    palette: list[str] | None = None
    packed_color: str = "#9DD3FF"

    @field_validator("palette")
    @classmethod
    def validate_palette(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return value
        if not value:
            raise ValueError("palette must contain at least one color")
        if len(value) > 64:
            raise ValueError("palette may contain at most 64 colors")
        return [_check_color(color) for color in value]

    @field_validator("packed_color")
    @classmethod
    def validate_packed_color(cls, value: str) -> str:
        return _check_color(value)


class ContainerSchema(BaseModel):
    """Container dimensions in meters. Values are normalized downstream."""

    model_config = ConfigDict(extra="allow")

    length: Any = None
    width: Any = None
    height: Any = None


class ItemSchema(BaseModel):
    """A packed item, or an unplaced item with a quantity.

    Dimensions may be nested under ``dimensions`` or given as flat
    ``length``/``width``/``height`` fields. ``position`` accepts ``[x, y, z]``
    or ``{"x": .., "y": .., "z": ..}``.
    """

    model_config = ConfigDict(extra="allow")

    name: Any = None
    dimensions: Any = None
    length: Any = None
    width: Any = None
    height: Any = None
    position: Any = None
    quantity: Any = None

    def to_raw(self) -> dict[str, Any]:
        """Plain dict of the fields that were given, extras included."""
        return self.model_dump(exclude_none=True)


class LayoutRequestSchema(BaseModel):
    """Root model of a layout request.

    Accepts the field names packing engines emit (``container_dimensions``,
    ``packed_items_data``) as well as the short names.

    Attributes:
        version: Request schema version.
        container_name: Optional display name of the container.
        utilization: Utilization reported by the packing engine, carried
            through unchanged.
        container: Container dimensions.
        items: Items to lay out.
        settings: Scene settings.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    version: str = "1.0"
    container_name: str | None = None
    utilization: float | str | None = None
    container: ContainerSchema = Field(
        default_factory=ContainerSchema,
        validation_alias=AliasChoices("container", "container_dimensions"),
    )
    items: list[ItemSchema] = Field(
        default_factory=list,
        validation_alias=AliasChoices("items", "packed_items_data"),
    )
    settings: SceneSettingsSchema = Field(default_factory=SceneSettingsSchema)

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: str) -> str:
        if value not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{value}'. Supported: {supported}"
            )
        return value
