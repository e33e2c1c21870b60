"""
Application factory for the Guitar Store API.

``create_app`` wires settings, logging, the in-memory repository and the
routers together. A module-level ``app`` is built at import time so that
uvicorn can discover it::

    uvicorn guitar_api.app:app --port 3000
"""

from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from guitar_api.core.config import Settings, get_settings
from guitar_api.core.logging_config import setup_logging
from guitar_api.repositories.guitar_repository import GuitarRepository
from guitar_api.routers import admin as admin_router
from guitar_api.routers import guitars as guitars_router
from guitar_api.services.guitar_service import GuitarService

logger = logging.getLogger(__name__)

LIVENESS_MESSAGE = "Fender Guitars API is running 🎸"
UVICORN_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[GuitarRepository] = None,
) -> FastAPI:
    """Build a configured FastAPI instance.

    The collection is loaded here, once, before the first request. Passing a
    prebuilt ``repository`` skips that load (tests use it to control state).
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if repository is None:
        repository = GuitarRepository(
            settings.data_file,
            persist=settings.persist_enabled,
            strict_load=settings.strict_load,
        )
        repository.load()
    if not repository.persist:
        logger.warning("Persistence disabled: changes will not be written to %s", repository.data_file)

    app = FastAPI(title="Fender Guitars API")
    app.state.guitar_service = GuitarService(repository)

    @app.get("/", response_class=PlainTextResponse)
    def liveness() -> str:
        return LIVENESS_MESSAGE

    app.include_router(guitars_router.router)
    app.include_router(admin_router.router)
    return app


app = create_app()


def uvicorn_log_level(level: str) -> str:
    """Map a logging level name onto the names uvicorn accepts."""
    name = (level or "").strip().lower()
    if name == "warn":
        return "warning"
    if name == "fatal":
        return "critical"
    return name if name in UVICORN_LOG_LEVELS else "info"


def main() -> None:
    settings = get_settings()
    logger.info("Fender Guitars API listening on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=uvicorn_log_level(settings.log_level))


if __name__ == "__main__":
    main()
