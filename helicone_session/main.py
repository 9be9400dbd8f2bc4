"""
Helicone session tagger - event API entry point.

A host that runs out of process posts its session lifecycle events here; the
tracker it updates is the same one wired into the tracked HTTP client.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from helicone_session.config import Settings, get_settings
from helicone_session.api.routes import events
from helicone_session.services.session_tracker import SessionTracker
from helicone_session.utils.logging import setup_logging
from helicone_session.middleware.request_id import RequestIDMiddleware
from helicone_session.middleware.logging_mw import RequestLoggingMiddleware
from helicone_session.middleware.error_handler import register_exception_handlers

logger = logging.getLogger("api.main")


def create_app(tracker: SessionTracker | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the event API around an explicitly owned tracker."""
    settings = settings or get_settings()
    tracker = tracker or SessionTracker(fallback_prefix=settings.session_name_prefix)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting session tagger for {settings.helicone_base_url}")
        yield
        logger.info("Shutting down session tagger")

    app = FastAPI(
        title="Helicone Session Tagger",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )
    app.state.tracker = tracker
    app.state.settings = settings

    # ── Middleware (order matters: first added = innermost) ──────────
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(events.router, prefix="/api/v1", tags=["events"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": settings.app_name}

    return app


def build_app() -> FastAPI:
    """Entry point for ``uvicorn --factory helicone_session.main:build_app``."""
    settings = get_settings()
    setup_logging(debug=settings.debug)
    return create_app(settings=settings)
