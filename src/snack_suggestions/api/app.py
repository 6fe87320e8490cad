"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Query, Request

from snack_suggestions.api.scheduler import router as scheduler_router
from snack_suggestions.api.schemas import MacroValues, ProgressResponse
from snack_suggestions.app_logging import configure_logging
from snack_suggestions.containers import AppContainer
from snack_suggestions.services.scheduler import DEFAULT_CHILD_AGE


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to release resources on shutdown")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(scheduler_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/progress/{child_id}")
    async def progress(
        child_id: str,
        request: Request,
        age: float = Query(default=DEFAULT_CHILD_AGE, ge=0),
    ) -> ProgressResponse:
        """Return today's nutrition progress for a child."""
        state_container: AppContainer = request.app.state.container
        report = await state_container.nutrition_service.get_progress(child_id, age)
        return ProgressResponse(
            child_id=child_id,
            totals=MacroValues(**asdict(report.totals)),
            targets=MacroValues(**asdict(report.targets)),
            progress=MacroValues(**asdict(report.progress)),
            average_progress=report.progress.average,
        )

    return app
