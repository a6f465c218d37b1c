"""
PSX Analytics Backend API
=========================

FastAPI service hosting the built client and a read-only catalogue API.

Layout
------
• `/health`                   : process diagnostics (core.health).
• `/api/categories`, `/api/tasks*` : catalogue router (backend.routes.catalogue).
• everything else             : static client with index.html fallback
                                (backend.static), when a build is present.

The app is built once by `initialize_app()`. Importing this module (as the
serverless entry point does) initializes it; `run()` additionally starts a
uvicorn server on PORT.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

# --------------------------------------------------------------------------- #
# Path setup: ensure project root on sys.path
# --------------------------------------------------------------------------- #

# Allows imports like `core.*`, `catalogue.*` when running via uvicorn
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from core import config
from core.health import system_health
from core.metadata import __project__, __version__
from backend.routes.catalogue import router as catalogue_router
from backend.static import serve_static

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# App factory
# --------------------------------------------------------------------------- #

def create_app(static_dir: Optional[str] = None, serve_client: Optional[bool] = None) -> FastAPI:
    """
    Build a fully wired FastAPI app.

    Parameters
    ----------
    static_dir : str, optional
        Build directory of the client; defaults to config.STATIC_DIR.
    serve_client : bool, optional
        Force static hosting on/off. By default it is on in production
        (where a missing build is an error) and whenever the build exists.
    """
    static_dir = static_dir or config.STATIC_DIR
    if serve_client is None:
        serve_client = config.is_production() or os.path.isdir(static_dir)

    app = FastAPI(
        title=f"{__project__} API",
        version=__version__,
        description=(
            "Static host and read-only catalogue API for the PSX Analytics task library.\n"
            "- Categories and tasks with search.\n"
            "- Colab-ready notebook download per task."
        ),
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        path = request.url.path
        if path.startswith("/api"):
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.info(
                "[backend] %s %s %s in %dms",
                request.method, path, response.status_code, duration_ms,
            )
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(_request: Request, exc: Exception):
        status = getattr(exc, "status_code", None) or getattr(exc, "status", None) or 500
        logger.error("[backend] Error %s: %s", status, exc, exc_info=not config.is_production())
        message = "An error occurred" if config.is_production() else (str(exc) or "Internal Server Error")
        return JSONResponse(status_code=status, content={"message": message})

    @app.get("/health")
    async def health():
        """System health endpoint (delegates to core.health.system_health)."""
        return system_health()

    app.include_router(catalogue_router)

    # The static fallback matches every path, so it goes last.
    if serve_client:
        serve_static(app, static_dir)
        logger.info("[backend] Serving client from %s", static_dir)

    return app


# --------------------------------------------------------------------------- #
# One-shot initialization
# --------------------------------------------------------------------------- #

_init_lock = threading.Lock()
_app: Optional[FastAPI] = None


def initialize_app() -> FastAPI:
    """Build the process-wide app on first call; later calls return the same handle."""
    global _app
    if _app is not None:
        return _app
    with _init_lock:
        if _app is None:
            _app = create_app()
    return _app


app = initialize_app()


# --------------------------------------------------------------------------- #
# Server entrypoint
# --------------------------------------------------------------------------- #

def run() -> None:
    """Serve the app with uvicorn on HOST:PORT (default 0.0.0.0:5000)."""
    import uvicorn

    from core.logging_setup import setup_logging

    setup_logging()
    logger.info("[backend] serving on http://localhost:%d", config.PORT)
    # uvicorn logs bind errors (e.g. port in use) and exits with status 1;
    # SIGINT/SIGTERM trigger its graceful shutdown.
    uvicorn.run(initialize_app(), host=config.HOST, port=config.PORT, log_level="info")


if __name__ == "__main__":
    run()
