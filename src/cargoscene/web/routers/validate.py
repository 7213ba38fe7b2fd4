"""Request validation endpoint."""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from cargoscene.application.config import (
    ConfigError,
    load_request_from_dict,
    validate_request,
)
from cargoscene.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_layout_request(
    payload: Annotated[dict[str, Any], Body(description="Layout request JSON")],
) -> ValidationResultSchema:
    """Validate a layout request without returning the scene.

    Schema errors are reported in the body with ``is_valid`` false rather
    than as an error status, so clients can show every problem at once.
    """
    try:
        request = load_request_from_dict(payload)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"path": d.get("path"), "message": d.get("message")} for d in e.details
            ],
        )

    result = validate_request(request)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
