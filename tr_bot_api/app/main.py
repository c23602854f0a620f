"""
Main entrypoint for the TR Bot API.

This module assembles the FastAPI application: it sets up logging,
opens the database handle, installs CORS and the error handlers and
includes the API routers.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so
it can be served directly, e.g.::

    uvicorn tr_bot_api.app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.
        Tests pass their own to point the app at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)

    db = Database(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # Creates the database file on first start.
        db.init_db()
        yield

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.db = db
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.client_origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app, app_settings)

    @app.get("/", tags=["health"])
    async def root() -> Dict[str, bool]:
        return {"ok": True}

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
