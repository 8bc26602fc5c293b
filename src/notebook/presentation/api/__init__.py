"""FastAPI application for the notebook backend."""

from notebook.presentation.api.app import create_app

__all__ = ["create_app"]
