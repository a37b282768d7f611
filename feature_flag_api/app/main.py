"""
Main entrypoint for the Feature Flag Service.

This module assembles the FastAPI application: logging, CORS,
exception handlers, the flag routes and the Swagger UI.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so the service can be
run with uvicorn or another ASGI server, e.g.::

    uvicorn feature_flag_api.app.main:app --port 3000
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.flag_store import FlagStore

DOCS_URL = "/api/v1/api-docs"
OPENAPI_URL = "/api/v1/openapi.json"


def create_app(store: Optional[FlagStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[FlagStore]
        Store the application serves.  A new store holding the default
        flags is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        servers=[{"url": settings.public_url, "description": "Development server"}],
        docs_url=DOCS_URL,
        openapi_url=OPENAPI_URL,
        redoc_url=None,
    )
    app.state.store = store if store is not None else FlagStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(v1_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
