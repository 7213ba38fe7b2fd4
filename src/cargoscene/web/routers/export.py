"""Export format endpoints."""

import tempfile
from pathlib import Path
from typing import Annotated, Any

from fastapi import APIRouter, Body
from fastapi.responses import Response

from cargoscene.application.config import load_request_from_dict, request_to_layout_input
from cargoscene.infrastructure.exporters import ExporterRegistry, safe_file_stem
from cargoscene.web.dependencies import GenerateCommandDep
from cargoscene.web.exceptions import SceneGenerationError, UnsupportedFormatError
from cargoscene.web.schemas.responses import ErrorResponseSchema, ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

_MEDIA_TYPES = {
    "json": "application/json",
    "stl": "application/octet-stream",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post(
    "/{format_name}",
    responses={400: {"model": ErrorResponseSchema}, 422: {"model": ErrorResponseSchema}},
)
async def export_scene(
    format_name: str,
    payload: Annotated[dict[str, Any], Body(description="Layout request JSON")],
    command: GenerateCommandDep,
) -> Response:
    """Lay out a container and return the scene in ``format_name``.

    Returns:
        The exported file as a download.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    request = load_request_from_dict(payload)
    output = command.execute(request_to_layout_input(request))
    if not output.is_valid:
        raise SceneGenerationError(output.errors)

    exporter = ExporterRegistry.get(format_name)()
    with tempfile.NamedTemporaryFile(
        suffix=f".{exporter.file_extension}", delete=False
    ) as tmp:
        tmp_path = Path(tmp.name)
    try:
        exporter.export(output, tmp_path)
        content = tmp_path.read_bytes()
    finally:
        tmp_path.unlink(missing_ok=True)

    stem = safe_file_stem(output.display_name, default="container")
    filename = f"{stem}.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=_MEDIA_TYPES.get(format_name, "application/octet-stream"),
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
