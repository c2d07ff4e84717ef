# squirrel_registry/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn squirrel_registry:app --reload
"""

from .main import app

__all__ = ["app"]
