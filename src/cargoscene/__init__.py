"""Render-ready 3D scenes from container packing results."""

from cargoscene.domain import place_items, scale_to_scene

__version__ = "0.1.0"

__all__ = ["place_items", "scale_to_scene", "__version__"]
