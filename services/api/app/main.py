"""FastAPI application factory / entrypoint.

This service exposes historical NBA team statistics over HTTP:
- `GET /records`, `GET /records/{year}`: per-season team records
- `GET /data`: feature/label dataset used by the training job
- `GET /health`: liveness probe

Operational notes:
- The CSV record store is built once in the lifespan, before any request is
  served. If a configured file cannot be read, startup fails and the server
  does not come up.
- Every request is logged with its status and duration, and is cut off with a
  503 after `server.timeout_seconds`.

Run locally with `nba-record-api` or `uvicorn app.main:app`.
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from common.logging import configure_logging

from .datastore import LoadError, build_store
from .errors import error_response, register_exception_handlers
from .routes import router
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Service settings. Loaded from YAML/env when omitted.

    Returns:
        FastAPI: App whose lifespan loads the record store.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        ds = settings.datastore
        logger.info("Initializing CSV record store from %s (%d seasons)", ds.filepath, len(ds.files))
        try:
            app.state.store = build_store(ds.files, directory=ds.filepath)
        except LoadError:
            logger.exception("Record store failed to load; refusing to start")
            raise
        yield

    app = FastAPI(title="NBA Record Predictor API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings

    @app.middleware("http")
    async def log_and_limit(request: Request, call_next):
        start = time.perf_counter()
        # unhandled errors become a 500 in the outer error middleware
        status = 500
        try:
            response = await asyncio.wait_for(call_next(request), timeout=settings.server.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error("%s %s timed out after %.1fs", request.method, request.url.path, settings.server.timeout_seconds)
            status = 503
            response = error_response(503, "request timed out")
        else:
            status = response.status_code
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info("%s %s %d %.1fms", request.method, request.url.path, status, elapsed_ms)
        return response

    register_exception_handlers(app)
    app.include_router(router)

    @app.get("/health")
    def health(request: Request):
        """Health check endpoint.

        Returns:
            dict: `{"status": "ok", "service": "api", "years": <loaded seasons>}`.
        """
        store = getattr(request.app.state, "store", None)
        return {"status": "ok", "service": "api", "years": len(store.years()) if store else 0}

    return app


app = create_app()


def run() -> None:
    """Console entrypoint: serve the module-level app with uvicorn."""
    settings = app.state.settings
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        timeout_keep_alive=int(settings.server.timeout_seconds),
    )


if __name__ == "__main__":
    run()
