"""FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

import majin
from majin.api import generation, models, results, settings
from majin.api.errors import register_exception_handlers
from majin.core.app_context import AppContext
from majin.utils.logging import get_logger

logger = get_logger("api.app")


def create_app(ctx: AppContext) -> FastAPI:
    """Build the API around an already bootstrapped context.

    The registry connection is opened when the app starts and closed when
    it shuts down, on every exit path.
    """
    deps = ctx.deps

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        deps.connection.open()
        logger.info("Majin API started")
        try:
            yield
        finally:
            deps.connection.close()
            logger.info("Majin API stopped")

    app = FastAPI(title="Majin", version=majin.__version__, lifespan=lifespan)
    app.state.deps = deps

    register_exception_handlers(app)
    app.include_router(generation.router)
    app.include_router(models.router)
    app.include_router(results.router)
    app.include_router(settings.router)

    @app.get("/healthz")
    def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
