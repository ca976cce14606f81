"""
Main entrypoint for the Creator Hub API.

This module assembles the FastAPI application, sets up logging,
constructs the data store and includes versioned routers.  The
``create_app`` function builds a fully independent application (with
its own store), and one instance is created at import time as
``app`` so it can be served directly::

    uvicorn creator_hub_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .storage import MemStorage, Storage


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[Storage]
        Store to serve from.  A fresh ``MemStorage`` is built when
        omitted.  The store lives exactly as long as the application;
        the session sweep runs between startup and shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    if storage is None:
        storage = MemStorage(
            session_check_period=settings.session_check_period,
            session_ttl=settings.access_token_expire_minutes * 60,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.storage.session_store.start()
        logger.info("%s %s started", settings.project_name, settings.api_version)
        try:
            yield
        finally:
            await app.state.storage.session_store.stop()
            logger.info("%s stopped", settings.project_name)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug, lifespan=lifespan)
    app.state.storage = storage

    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
