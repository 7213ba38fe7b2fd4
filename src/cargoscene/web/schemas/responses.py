"""Pydantic response schemas for the REST API.

Field names follow the scene JSON written by the json exporter, so the
API response and an exported file can be consumed by the same renderer.
"""

from typing import Any

from pydantic import BaseModel, Field


class SizeSchema(BaseModel):
    """Box extents along the container axes."""

    length: float
    width: float
    height: float


class ScaleSchema(BaseModel):
    scene_scale: float = Field(..., description="Scene units per meter")
    target_max: float = Field(..., description="Scene size of the longest edge")


class ContainerBoxSchema(BaseModel):
    """Translucent container box in scene units."""

    center: list[float] = Field(..., description="[x, y, z] in scene units")
    size: SizeSchema
    color: str
    opacity: float


class BoxSchema(BaseModel):
    """A placed item box."""

    index: int = Field(..., description="Position in the layout output")
    name: str = Field(..., description="Source item name")
    position: list[float] = Field(..., description="Clamped min corner in meters")
    dimensions: SizeSchema = Field(..., description="Real item size in meters")
    center: list[float] = Field(..., description="Box center in scene units")
    size: SizeSchema = Field(..., description="Rendered size in scene units")
    color: str


class AnnotationSchema(BaseModel):
    """Dimension marker with its label."""

    axis: str
    start: list[float]
    end: list[float]
    label: str
    label_anchor: list[float]
    color: str


class GridSchema(BaseModel):
    size: float
    divisions: int
    elevation: float


class OverlapSchema(BaseModel):
    """Intersecting pair of boxes, by index."""

    first: int
    second: int
    extent: SizeSchema
    volume: float


class SummarySchema(BaseModel):
    requested: int
    placed: int
    dropped: int
    utilization: float = Field(..., description="Volume utilization in percent")


class SceneResponseSchema(BaseModel):
    """Response for scene layout."""

    schema_version: str
    container_name: str | None = None
    upstream_utilization: float | str | None = None
    errors: list[str] = Field(default_factory=list)
    mode: str
    container: SizeSchema
    scale: ScaleSchema
    container_box: ContainerBoxSchema
    boxes: list[BoxSchema] = Field(default_factory=list)
    annotations: list[AnnotationSchema] = Field(default_factory=list)
    grid: GridSchema | None = None
    overlaps: list[OverlapSchema] = Field(default_factory=list)
    summary: SummarySchema
    warnings: list[str] = Field(default_factory=list)


class ValidationResultSchema(BaseModel):
    """Response for request validation."""

    is_valid: bool = Field(..., description="Whether the request is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
