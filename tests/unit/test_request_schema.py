"""Unit tests for layout request schemas, loading and adaptation.

These tests verify:
- Packing-engine field names are accepted as aliases
- Malformed container and item values pass schema validation
- Unknown fields and bad settings are rejected with clear paths
- Loader error handling (file not found, JSON parse errors)
- Conversion of requests to SceneConfig and LayoutInput
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cargoscene.application.config import (
    SUPPORTED_VERSIONS,
    ConfigError,
    ItemSchema,
    LayoutRequestSchema,
    SceneSettingsSchema,
    config_to_scene_config,
    format_json_path,
    load_request,
    load_request_from_dict,
    request_to_layout_input,
)
from cargoscene.domain import SceneConfig
from cargoscene.domain.services import DEFAULT_PALETTE


class TestLayoutRequestSchema:
    """Tests for LayoutRequestSchema."""

    def test_defaults(self) -> None:
        request = LayoutRequestSchema()
        assert request.version == "1.0"
        assert request.items == []
        assert request.container.length is None
        assert request.settings.target_max == 8.0

    def test_packing_engine_aliases(self) -> None:
        request = load_request_from_dict(
            {
                "container_dimensions": {"length": 12.03, "width": 2.35, "height": 2.39},
                "packed_items_data": [{"name": "a", "dimensions": [1, 1, 1], "position": [0, 0, 0]}],
            }
        )
        assert request.container.length == 12.03
        assert len(request.items) == 1

    def test_malformed_numbers_are_accepted(self) -> None:
        request = load_request_from_dict(
            {
                "container": {"length": "abc", "width": -3},
                "items": [{"dimensions": "tall", "position": "nowhere", "quantity": "many"}],
            }
        )
        assert request.container.length == "abc"
        assert request.items[0].quantity == "many"

    def test_utilization_is_carried_as_given(self) -> None:
        assert load_request_from_dict({"utilization": "87.5%"}).utilization == "87.5%"
        assert load_request_from_dict({"utilization": 87.5}).utilization == 87.5

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS


class TestItemSchema:
    """Tests for ItemSchema.to_raw."""

    def test_only_given_fields(self) -> None:
        item = ItemSchema.model_validate({"name": "a", "dimensions": [1, 2, 3]})
        assert item.to_raw() == {"name": "a", "dimensions": [1, 2, 3]}

    def test_extra_fields_are_kept(self) -> None:
        item = ItemSchema.model_validate({"name": "a", "sku": "X-1", "weight": 12})
        assert item.to_raw() == {"name": "a", "sku": "X-1", "weight": 12}


class TestSceneSettingsSchema:
    """Tests for SceneSettingsSchema."""

    def test_defaults_match_scene_config(self) -> None:
        settings = SceneSettingsSchema()
        config = SceneConfig()
        assert settings.target_max == config.target_max
        assert settings.visual_pad == config.visual_pad
        assert settings.packing_gap == config.packing_gap
        assert settings.max_instances == config.max_instances
        assert settings.packed_color == config.packed_color

    @pytest.mark.parametrize(
        "settings",
        [
            {"target_max": 0},
            {"target_max": -1},
            {"visual_pad": -0.1},
            {"max_instances": 0},
            {"label_precision": 9},
            {"palette": []},
            {"palette": ["blue"]},
            {"packed_color": "#12345"},
            {"fov": 45},
        ],
    )
    def test_invalid_settings_rejected(self, settings) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_request_from_dict({"settings": settings})
        assert exc_info.value.error_type == "validation"
        assert all(d["path"].startswith("settings") for d in exc_info.value.details)

    def test_short_hex_color(self) -> None:
        assert SceneSettingsSchema(packed_color="#abc").packed_color == "#abc"


class TestLoadRequestFromDict:
    """Tests for load_request_from_dict error reporting."""

    def test_unknown_root_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_request_from_dict({"colour": "red"})
        assert exc_info.value.details[0]["path"] == "colour"

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_request_from_dict({"version": "9.9"})
        assert "Unsupported schema version" in str(exc_info.value)
        assert exc_info.value.details[0]["path"] == "version"

    def test_items_must_be_a_list(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_request_from_dict({"items": {"name": "a"}})
        assert exc_info.value.details[0]["path"] == "items"

    def test_non_object_document(self) -> None:
        with pytest.raises(ConfigError):
            load_request_from_dict([1, 2, 3])

    def test_message_lists_each_error(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_request_from_dict({"settings": {"target_max": -1, "max_instances": 0}})
        message = str(exc_info.value)
        assert message.startswith("Layout request validation failed:")
        assert "settings.target_max" in message
        assert "settings.max_instances" in message


class TestFormatJsonPath:
    """Tests for format_json_path."""

    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("items", 2, "quantity"), "items[2].quantity"),
            (("settings", "target_max"), "settings.target_max"),
            (("settings", "palette", 0), "settings.palette[0]"),
            ((0,), "[0]"),
            ((), ""),
        ],
    )
    def test_format(self, loc, expected) -> None:
        assert format_json_path(loc) == expected


class TestLoadRequest:
    """Tests for load_request."""

    def test_valid_file(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "valid_precomputed.json")
        assert request.container_name == "crate-12"
        assert len(request.items) == 2

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_request(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_request(fixtures_path / "invalid_json.json")
        assert exc_info.value.error_type == "json_parse"
        assert "line" in exc_info.value.details[0]
        assert "Invalid JSON" in str(exc_info.value)

    def test_oversized_integer_literal(self, tmp_path: Path) -> None:
        path = tmp_path / "huge.json"
        path.write_text('{"container": {"length": ' + "1" * 5000 + "}}", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_request(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.path == path

    def test_validation_error_records_path(self, fixtures_path: Path) -> None:
        path = fixtures_path / "unknown_field.json"
        with pytest.raises(ConfigError) as exc_info:
            load_request(path)
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path == path

    def test_round_trip_through_file(self, tmp_path: Path) -> None:
        path = tmp_path / "request.json"
        path.write_text(json.dumps({"container": {"length": 3}, "items": []}), encoding="utf-8")
        assert load_request(path).container.length == 3


class TestAdapter:
    """Tests for request to domain conversion."""

    def test_default_settings(self) -> None:
        assert config_to_scene_config(SceneSettingsSchema()) == SceneConfig()

    def test_settings_are_copied(self) -> None:
        settings = SceneSettingsSchema(target_max=12.0, show_grid=True, packing_gap=0.0)
        config = config_to_scene_config(settings)
        assert config.target_max == 12.0
        assert config.show_grid is True
        assert config.packing_gap == 0.0
        assert config.palette == DEFAULT_PALETTE

    def test_palette_becomes_tuple(self) -> None:
        config = config_to_scene_config(SceneSettingsSchema(palette=["#111111", "#222"]))
        assert config.palette == ("#111111", "#222")

    def test_request_to_layout_input(self, fixtures_path: Path) -> None:
        request = load_request(fixtures_path / "valid_shelf.json")
        layout_input = request_to_layout_input(request)
        assert layout_input.container == {"length": 2, "width": 1.2, "height": 1}
        assert layout_input.items == [
            {"name": "box", "length": 0.5, "width": 0.5, "height": 0.5, "quantity": 4}
        ]
        assert layout_input.config is not None
        assert layout_input.config.show_grid is True
        assert layout_input.container_name is None
