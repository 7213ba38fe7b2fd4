"""Scene layout endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from cargoscene.application.config import load_request_from_dict, request_to_layout_input
from cargoscene.infrastructure.exporters import layout_to_dict
from cargoscene.web.dependencies import GenerateCommandDep
from cargoscene.web.exceptions import SceneGenerationError
from cargoscene.web.schemas.responses import ErrorResponseSchema, SceneResponseSchema

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post(
    "",
    response_model=SceneResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def generate_scene(
    payload: Annotated[dict[str, Any], Body(description="Layout request JSON")],
    command: GenerateCommandDep,
) -> SceneResponseSchema:
    """Lay out a container and return render-ready scene primitives.

    Malformed container or item values are defaulted, not rejected; the
    substitutions are listed in ``warnings``. Unknown top-level fields and
    out-of-range settings are rejected with 422.
    """
    request = load_request_from_dict(payload)
    output = command.execute(request_to_layout_input(request))
    if not output.is_valid:
        raise SceneGenerationError(output.errors)
    return SceneResponseSchema.model_validate(layout_to_dict(output))
