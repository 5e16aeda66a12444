"""Expose the FastAPI application and the bounded-log primitives."""
from __future__ import annotations

from .app import app, create_app
from .buffer import BoundedLog, IdGenerator, Page
from .config import Settings, load_settings

__all__ = [
    "app",
    "create_app",
    "BoundedLog",
    "IdGenerator",
    "Page",
    "Settings",
    "load_settings",
]
