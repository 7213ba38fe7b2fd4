"""Validation structures and layout advisory checks.

A request that passes schema validation can still produce a scene the user
did not expect: container dimensions replaced by defaults, items shrunk to
an epsilon because their dimensions were unreadable, instances dropped by
the shelf packer, overlapping boxes. These are reported as warnings; only
schema violations are errors.
"""

from dataclasses import dataclass, field
from typing import Any

from cargoscene.application.config.adapter import config_to_scene_config
from cargoscene.application.config.schemas import LayoutRequestSchema
from cargoscene.domain.services import (
    SceneLayoutService,
    substituted_container_fields,
    substituted_dimension_fields,
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "settings.target_max")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the request has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check if the request has any warnings."""
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_input_defaults(request: LayoutRequestSchema) -> ValidationResult:
    """Warn about container and item values the normalizer will replace."""
    result = ValidationResult()
    container = request.container.model_dump()
    for name in substituted_container_fields(container):
        result.add_warning(
            path=f"container.{name}",
            message=f"Container {name} is missing or not a positive number",
            suggestion="The default container size (2 x 1.5 x 1.5 m) will be used",
        )

    if not request.items:
        result.add_warning(
            path="items",
            message="Request contains no items",
            suggestion="Only the container outline will be rendered",
        )

    for i, item in enumerate(request.items):
        missing = substituted_dimension_fields(item.to_raw())
        if missing:
            result.add_warning(
                path=f"items[{i}].dimensions",
                message=(
                    f"Item dimension(s) {', '.join(missing)} missing or not "
                    "positive"
                ),
                suggestion="The item will be drawn 1 mm thick on those axes",
            )
    return result


def check_layout_advisories(request: LayoutRequestSchema) -> ValidationResult:
    """Run the layout and report dropped instances and overlapping boxes."""
    result = ValidationResult()
    service = SceneLayoutService(config_to_scene_config(request.settings))
    layout = service.layout(
        request.container.model_dump(), [item.to_raw() for item in request.items]
    )

    if layout.dropped_count:
        result.add_warning(
            path="items",
            message=(
                f"{layout.dropped_count} of {layout.requested_count} item "
                "instances do not fit and will not be drawn"
            ),
            suggestion="Provide pre-computed positions or a larger container",
        )
    for pair in layout.overlaps:
        first = layout.boxes[pair.first]
        second = layout.boxes[pair.second]
        result.add_warning(
            path=f"items[{pair.first}]",
            message=(
                f"'{first.item_ref}' overlaps '{second.item_ref}' by "
                f"{pair.volume:.4g} cubic scene units"
            ),
        )
    return result


def validate_request(request: LayoutRequestSchema) -> ValidationResult:
    """Collect every advisory for a schema-valid request.

    Args:
        request: A request returned by ``load_request``.

    Returns:
        ValidationResult with warnings only; schema errors are raised by
        the loader before this point.
    """
    result = check_input_defaults(request)
    result.merge(check_layout_advisories(request))
    return result
