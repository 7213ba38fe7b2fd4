"""Unit tests for request advisories.

These tests verify:
- Clean requests produce no warnings (exit code 0)
- Defaulted container fields and item dimensions are reported
- Dropped instances and overlapping boxes are reported
- ValidationResult exit codes and merging
"""

from __future__ import annotations

from pathlib import Path

from cargoscene.application.config import (
    ValidationResult,
    check_input_defaults,
    check_layout_advisories,
    load_request,
    load_request_from_dict,
    validate_request,
)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_result(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warning_exit_code(self) -> None:
        result = ValidationResult().add_warning("items", "Request contains no items")
        assert result.is_valid
        assert result.exit_code == 2

    def test_error_wins_over_warning(self) -> None:
        result = ValidationResult().add_warning("items", "w").add_error("version", "e", "9.9")
        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].value == "9.9"

    def test_merge(self) -> None:
        first = ValidationResult().add_warning("a", "one")
        second = ValidationResult().add_warning("b", "two").add_error("c", "three")
        merged = first.merge(second)
        assert merged is first
        assert [w.path for w in merged.warnings] == ["a", "b"]
        assert len(merged.errors) == 1


class TestCheckInputDefaults:
    """Tests for check_input_defaults."""

    def test_clean_request(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "valid_precomputed.json")
        assert check_input_defaults(request).warnings == []

    def test_defaulted_container_fields(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "malformed_values.json")
        paths = [w.path for w in check_input_defaults(request).warnings]
        assert paths[:3] == ["container.length", "container.width", "container.height"]

    def test_defaulted_item_dimensions(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "malformed_values.json")
        warnings = [w for w in check_input_defaults(request).warnings if w.path.startswith("items")]
        assert len(warnings) == 1
        assert warnings[0].path == "items[0].dimensions"
        assert "length, width" in warnings[0].message

    def test_flat_dimensions_are_recognized(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "valid_shelf.json")
        assert check_input_defaults(request).warnings == []

    def test_empty_items(self) -> None:
        request = load_request_from_dict({"container": {"length": 1, "width": 1, "height": 1}})
        warnings = check_input_defaults(request).warnings
        assert [w.path for w in warnings] == ["items"]
        assert warnings[0].suggestion is not None


class TestCheckLayoutAdvisories:
    """Tests for check_layout_advisories."""

    def test_dropped_instances(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "too_many_items.json")
        warnings = check_layout_advisories(request).warnings
        assert len(warnings) == 1
        assert warnings[0].message.startswith("1 of 2 item instances")

    def test_overlapping_boxes(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "overlapping.json")
        warnings = check_layout_advisories(request).warnings
        assert len(warnings) == 1
        assert warnings[0].path == "items[0]"
        assert "'a' overlaps 'b'" in warnings[0].message

    def test_settings_are_applied(self) -> None:
        request = load_request_from_dict(
            {
                "container": {"length": 10, "width": 10, "height": 1},
                "items": [{"dimensions": [0.1, 0.1, 0.1], "quantity": 20}],
                "settings": {"max_instances": 5},
            }
        )
        warnings = check_layout_advisories(request).warnings
        assert warnings[0].message.startswith("15 of 20")


class TestValidateRequest:
    """Tests for validate_request exit codes over the request fixtures."""

    def test_valid_precomputed(self, fixtures_path: Path) -> None:
        result = validate_request(load_request(fixtures_path / "valid_precomputed.json"))
        assert result.exit_code == 0

    def test_valid_shelf(self, fixtures_path: Path) -> None:
        result = validate_request(load_request(fixtures_path / "valid_shelf.json"))
        assert result.exit_code == 0

    def test_malformed_values_warn(self, fixtures_path: Path) -> None:
        result = validate_request(load_request(fixtures_path / "malformed_values.json"))
        assert result.is_valid
        assert result.exit_code == 2
        assert len(result.warnings) == 4

    def test_overlapping_warns(self, fixtures_path: Path) -> None:
        result = validate_request(load_request(fixtures_path / "overlapping.json"))
        assert result.exit_code == 2
