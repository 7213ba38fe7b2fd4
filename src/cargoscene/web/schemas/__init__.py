"""Pydantic schemas for the REST API."""

from cargoscene.web.schemas.responses import (
    AnnotationSchema,
    BoxSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    SceneResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    "AnnotationSchema",
    "BoxSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "SceneResponseSchema",
    "ValidationResultSchema",
]
