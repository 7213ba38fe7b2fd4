"""Tests for GenerateSceneCommand and the service factory."""

from __future__ import annotations

from pathlib import Path

import pytest

from cargoscene.application import (
    GenerateSceneCommand,
    LayoutInput,
    LayoutOutput,
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from cargoscene.application.config import load_request, request_to_layout_input
from cargoscene.domain import SceneConfig, SceneLayoutService
from cargoscene.domain.value_objects import PlacementMode
from cargoscene.infrastructure.exporters import ExportManager


class TestGenerateSceneCommand:
    """Tests for GenerateSceneCommand.execute."""

    def test_precomputed_request(self, fixtures_path: Path, generate_command: GenerateSceneCommand) -> None:
        layout_input = request_to_layout_input(load_request(fixtures_path / "valid_precomputed.json"))
        output = generate_command.execute(layout_input)

        assert output.is_valid
        assert output.layout is not None
        assert output.layout.mode is PlacementMode.PRECOMPUTED
        assert output.layout.placed_count == 2
        assert output.container_name == "crate-12"
        assert output.utilization == 41.7
        assert output.warnings == []

    def test_shelf_request_uses_input_config(
        self, fixtures_path: Path, generate_command: GenerateSceneCommand
    ) -> None:
        layout_input = request_to_layout_input(load_request(fixtures_path / "valid_shelf.json"))
        output = generate_command.execute(layout_input)

        assert output.layout is not None
        assert output.layout.mode is PlacementMode.SHELF
        assert output.layout.placed_count == 4
        assert output.layout.grid is not None

    def test_malformed_values_are_warnings(self, generate_command: GenerateSceneCommand) -> None:
        output = generate_command.execute(
            LayoutInput(container={"length": "abc"}, items=[{"position": "?"}])
        )
        assert output.is_valid
        assert any("Container length" in w for w in output.warnings)

    def test_injected_service_is_used_without_config(self) -> None:
        service = SceneLayoutService(SceneConfig(target_max=2.0))
        command = GenerateSceneCommand(layout_service=service)
        output = command.execute(LayoutInput(container={"length": 2, "width": 1, "height": 1}))
        assert output.layout is not None
        assert output.layout.scale.scene_scale == pytest.approx(1.0)

    def test_value_error_becomes_output_error(self) -> None:
        class FailingService(SceneLayoutService):
            def layout(self, container, items=None):
                raise ValueError("bad layout")

        command = GenerateSceneCommand(layout_service=FailingService())
        output = command.execute(LayoutInput(container=None, container_name="c-1"))
        assert not output.is_valid
        assert output.layout is None
        assert output.errors == ["bad layout"]
        assert output.warnings == []
        assert output.container_name == "c-1"


class TestLayoutOutput:
    """Tests for LayoutOutput."""

    def test_display_name_default(self) -> None:
        assert LayoutOutput(layout=None).display_name == "container"
        assert LayoutOutput(layout=None, container_name="crate-3").display_name == "crate-3"


class TestServiceFactory:
    """Tests for ServiceFactory and the module-level default."""

    def test_layout_service_is_cached(self) -> None:
        factory = ServiceFactory()
        assert factory.get_layout_service() is factory.get_layout_service()

    def test_config_reaches_service(self) -> None:
        config = SceneConfig(show_grid=True)
        factory = ServiceFactory(config=config)
        assert factory.get_layout_service().config is config

    def test_command_shares_service(self) -> None:
        factory = ServiceFactory()
        command = factory.create_generate_command()
        assert command.layout_service is factory.get_layout_service()

    def test_export_manager(self, tmp_path: Path) -> None:
        manager = ServiceFactory().create_export_manager(tmp_path)
        assert isinstance(manager, ExportManager)
        assert manager.output_dir == tmp_path

    def test_default_factory_is_shared(self) -> None:
        assert get_factory() is get_factory()

    def test_set_and_reset(self) -> None:
        custom = ServiceFactory(config=SceneConfig(target_max=4.0))
        set_factory(custom)
        assert get_factory() is custom
        reset_factory()
        assert get_factory() is not custom
