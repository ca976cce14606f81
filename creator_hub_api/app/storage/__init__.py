"""
Data store for the application.

``MemStorage`` is constructed once by ``create_app`` and attached to
``app.state.storage``.  Routes obtain it through the ``get_storage``
dependency rather than importing a module‑level instance, so tests can
build as many independent stores as they need.
"""

from fastapi import Request

from .base import Storage
from .memory import MemStorage
from .sessions import MemorySessionStore

__all__ = ["Storage", "MemStorage", "MemorySessionStore", "get_storage"]


def get_storage(request: Request) -> Storage:
    """FastAPI dependency returning the application's store."""
    return request.app.state.storage
