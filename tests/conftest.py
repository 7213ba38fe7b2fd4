"""Pytest configuration and shared fixtures for cargoscene tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from cargoscene.application.commands import GenerateSceneCommand


FIXTURES_PATH = Path(__file__).parent / "fixtures" / "requests"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end CLI and API tests")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON request fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def generate_command() -> "GenerateSceneCommand":
    """Create a GenerateSceneCommand using the factory."""
    from cargoscene.application.factory import get_factory

    return get_factory().create_generate_command()


@pytest.fixture(autouse=True)
def _reset_service_factory():
    """Give every test a fresh default ServiceFactory."""
    from cargoscene.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()
