"""Command line interface for cargoscene."""

from cargoscene.cli.main import app

__all__ = ["app"]
