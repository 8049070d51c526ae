"""Deps.rs-style status service — FastAPI application factory."""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.staticfiles import StaticFiles

from depstatus.api.errors import register_error_handlers
from depstatus.api.middleware.request_id import RequestIDMiddleware
from depstatus.api.routers import repo
from depstatus.badge import BadgeRenderer, render_badge
from depstatus.core.config import Settings, load_settings
from depstatus.core.logging import setup_logging
from depstatus.engine.base import AnalysisEngine
from depstatus.services.status_service import StatusService

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def create_app(
    engine: AnalysisEngine,
    settings: Settings | None = None,
    badge_renderer: BadgeRenderer = render_badge,
) -> FastAPI:
    """Build the FastAPI application around an analysis engine.

    Settings are resolved once here (from the environment unless given)
    and shared read-only by every request.
    """
    settings = settings or load_settings()
    setup_logging(settings)

    app = FastAPI(title="depstatus", docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.status_service = StatusService(engine)
    app.state.badge_renderer = badge_renderer

    register_error_handlers(app)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(repo.router, prefix="/repo", tags=["repo"])
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    return app
