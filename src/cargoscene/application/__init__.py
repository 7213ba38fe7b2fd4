"""Application layer - use cases and orchestration."""

from .commands import GenerateSceneCommand
from .dtos import LayoutInput, LayoutOutput
from .factory import ServiceFactory, get_factory, reset_factory, set_factory

__all__ = [
    "GenerateSceneCommand",
    "LayoutInput",
    "LayoutOutput",
    "ServiceFactory",
    "get_factory",
    "reset_factory",
    "set_factory",
]
