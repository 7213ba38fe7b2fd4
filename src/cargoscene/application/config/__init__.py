"""Request schema and loading system for layout requests.

This package provides JSON-based request loading and validation. It
includes Pydantic models for schema validation, a loader with structured
error reporting, and layout advisory checks.

Public API:
    - LayoutRequestSchema: Root request model
    - SceneSettingsSchema: Scene settings model
    - ContainerSchema: Container dimensions model
    - ItemSchema: Item model
    - load_request: Load a request from a JSON file
    - load_request_from_dict: Load a request from a dictionary
    - ConfigError: Exception for request errors
    - ValidationResult: Container for validation results
    - validate_request: Perform advisory validation
    - config_to_scene_config: Convert settings to SceneConfig
    - request_to_layout_input: Convert a request to a LayoutInput DTO

Example:
    >>> from pathlib import Path
    >>> from cargoscene.application.config import load_request, ConfigError
    >>>
    >>> try:
    ...     request = load_request(Path("container-7.json"))
    ...     print(f"{len(request.items)} items")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cargoscene.application.config.adapter import (
    config_to_scene_config,
    request_to_layout_input,
)
from cargoscene.application.config.loader import (
    ConfigError,
    format_json_path,
    load_request,
    load_request_from_dict,
)
from cargoscene.application.config.schemas import (
    SUPPORTED_VERSIONS,
    ContainerSchema,
    ItemSchema,
    LayoutRequestSchema,
    SceneSettingsSchema,
)
from cargoscene.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_input_defaults,
    check_layout_advisories,
    validate_request,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "ContainerSchema",
    "ItemSchema",
    "LayoutRequestSchema",
    "SceneSettingsSchema",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_input_defaults",
    "check_layout_advisories",
    "config_to_scene_config",
    "format_json_path",
    "load_request",
    "load_request_from_dict",
    "request_to_layout_input",
    "validate_request",
]
