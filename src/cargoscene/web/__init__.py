"""FastAPI REST API for container scene layout.

Usage:
    uvicorn cargoscene.web:app --reload
"""

from cargoscene.web.app import app, create_app

__all__ = ["app", "create_app"]
