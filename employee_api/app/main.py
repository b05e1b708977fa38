"""
Main entrypoint for the Employee API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds a new application
around its own :class:`EmployeeStore`, so every app instance (and
therefore every test) starts with an empty store.  A module level
``app`` is created at import time for ASGI servers, e.g.::

    uvicorn employee_api.app.main:app --port 8085
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from uvicorn import Config, Server

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import normalize_level, setup_logging
from .services.employee_service import EmployeeNotFound, EmployeeStore

logger = logging.getLogger(__name__)

DECODE_ERROR_MESSAGE = "Failed to decode request payload"


def create_app(store: Optional[EmployeeStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EmployeeStore]
        Store backing the endpoints.  A fresh, empty store is created
        when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.employee_store = store if store is not None else EmployeeStore()

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(EmployeeNotFound)
    async def employee_not_found_handler(request: Request, exc: EmployeeNotFound) -> JSONResponse:
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON, wrong field types and non‑numeric path ids all
        # end up here.
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": DECODE_ERROR_MESSAGE})

    return app


def run() -> None:
    """Serve the application with uvicorn using ``settings``.

    Uvicorn's own logging configuration is disabled so that its loggers
    use the handlers installed by ``setup_logging``.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.timeout_keep_alive,
        log_config=None,
        log_level=normalize_level(settings.log_level).lower(),
    )
    server = Server(config)
    logger.info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    server.run()


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
