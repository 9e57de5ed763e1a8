# src/journalcore/api/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from journalcore import __version__
from journalcore.api.parsing import router as parsing_router
from journalcore.config import get_settings
from journalcore.core.error_handlers import register_error_handlers
from journalcore.core.health import router as health_router
from journalcore.core.logging import configure_logging
from journalcore.core.middleware import RequestIDMiddleware

log = logging.getLogger("journalcore.api")

ENGINE_VERSION = "rule_based_v1"


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME, version=__version__, debug=settings.DEBUG)
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(parsing_router)

    @app.get("/version")
    async def version():
        return {"api_version": __version__, "engine_version": ENGINE_VERSION}

    log.info("app created env=%s", settings.ENV)
    return app


app = create_app()
