"""Layout request loading with structured error reporting.

Requests are JSON documents. Loading can fail for file system reasons,
for JSON syntax, or because the document does not match
``LayoutRequestSchema``; each case raises ConfigError with an
``error_type`` the CLI and API map to their own responses. Malformed
numbers inside container or item data are not errors here: they are
passed through and defaulted by the domain normalizer.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cargoscene.application.config.schemas import LayoutRequestSchema


class ConfigError(Exception):
    """Raised when a layout request cannot be loaded.

    Attributes:
        message: The primary error message.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: Path to the request file, if loaded from disk.
        details: Per-error details (line/column for JSON, path/message/value
            for validation).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path.

    Examples:
        >>> format_json_path(("items", 2, "quantity"))
        'items[2].quantity'
        >>> format_json_path(("settings", "target_max"))
        'settings.target_max'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Layout request validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None:
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_request_from_dict(
    data: Any, path: Path | None = None
) -> LayoutRequestSchema:
    """Validate a layout request already parsed from JSON.

    Args:
        data: Parsed JSON document, normally a dict.
        path: Source file, recorded on errors.

    Returns:
        The validated request.

    Raises:
        ConfigError: With ``error_type="validation"`` when the document
            does not match the request schema.
    """
    try:
        return LayoutRequestSchema.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_request(path: Path) -> LayoutRequestSchema:
    """Load and validate a layout request from a JSON file.

    Args:
        path: Path to the request file.

    Returns:
        The validated request.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or does not match the request schema.

    Example:
        >>> try:
        ...     request = load_request(Path("container-7.json"))
        ... except ConfigError as e:
        ...     print(e.error_type, e)
    """
    if not path.exists():
        raise ConfigError(
            message=f"Request file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading request file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading request file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in request file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    except ValueError as e:
        # Integer literals past the interpreter's digit limit
        raise ConfigError(
            message=f"Invalid JSON in request file: {path}: {e}",
            error_type="json_parse",
            path=path,
            details=[{"message": str(e)}],
        ) from e

    return load_request_from_dict(data, path)
