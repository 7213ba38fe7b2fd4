"""Tests for real-to-scene scaling."""

from __future__ import annotations

import pytest

from cargoscene.domain.services import SceneScaler, compute_scale, scale_to_scene
from cargoscene.domain.services.config import SceneConfig
from cargoscene.domain.value_objects import ContainerSpec, ScaleParams


class TestComputeScale:
    """Tests for compute_scale."""

    def test_longest_edge_maps_to_target(self) -> None:
        scale = compute_scale({"length": 2, "width": 1.5, "height": 1.5})
        assert scale == ScaleParams(scene_scale=4.0, target_max=8.0)

    def test_forty_foot_container(self) -> None:
        scale = compute_scale({"length": 12.03, "width": 2.35, "height": 2.39})
        assert scale.scene_scale == pytest.approx(8.0 / 12.03)
        assert scale.to_scene(12.03) == pytest.approx(8.0)

    def test_small_crate_renders_at_same_size(self) -> None:
        crate = compute_scale({"length": 0.5, "width": 1.0, "height": 0.4})
        assert crate.to_scene(1.0) == pytest.approx(8.0)

    def test_custom_target(self) -> None:
        scale = compute_scale(ContainerSpec(4.0, 2.0, 2.0), target_max=10.0)
        assert scale.scene_scale == pytest.approx(2.5)
        assert scale.target_max == 10.0

    @pytest.mark.parametrize(
        "raw,default_field,expected_max",
        [
            ({"length": 1.0, "width": 1.0, "height": 0}, "height", 1.5),
            ({"length": 1.0, "width": -1, "height": 1.0}, "width", 1.5),
            ({"length": "n/a", "width": 1.0, "height": 1.0}, "length", 2.0),
        ],
    )
    def test_invalid_dimension_is_defaulted_first(
        self, raw, default_field, expected_max
    ) -> None:
        """The default replaces the invalid field before the max is taken."""
        scale = compute_scale(raw)
        assert scale.scene_scale == pytest.approx(8.0 / expected_max)

    def test_missing_container_uses_defaults(self) -> None:
        assert compute_scale(None).scene_scale == pytest.approx(4.0)

    def test_idempotent(self) -> None:
        raw = {"length": 3.3, "width": 1.1, "height": 2.2}
        assert compute_scale(raw) == compute_scale(raw)


class TestSceneScaler:
    """Tests for the SceneScaler service and scale_to_scene."""

    def test_configured_target(self) -> None:
        scaler = SceneScaler(target_max=16.0)
        assert scaler.compute_scale(ContainerSpec(2.0, 1.0, 1.0)).scene_scale == 8.0

    def test_scale_to_scene_uses_config(self) -> None:
        config = SceneConfig(target_max=6.0)
        scale = scale_to_scene({"length": 3, "width": 1, "height": 1}, config)
        assert scale.scene_scale == pytest.approx(2.0)

    def test_scale_to_scene_default(self) -> None:
        assert scale_to_scene({"length": 8, "width": 1, "height": 1}).scene_scale == 1.0
