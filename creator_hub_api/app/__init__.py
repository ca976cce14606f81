"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, content, messages, bookmarks,
follows, payments) exposes a router defined in ``api/v1/endpoints``
and a service in ``services``.  All state lives in the in‑memory
store from ``storage``, which the application constructs once and
hands to the routes through a dependency.
"""

from .main import app  # noqa: F401
