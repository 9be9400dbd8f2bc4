"""
Global exception handlers for the event API.
Returns consistent JSON error responses and never leaks stack traces.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from helicone_session.core.exceptions import HeliconeSessionError

logger = logging.getLogger("api.errors")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app."""

    @app.exception_handler(HeliconeSessionError)
    async def session_error_handler(request: Request, exc: HeliconeSessionError):
        logger.warning(
            f"{type(exc).__name__} on {request.method} {request.url.path}: {exc.message}",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "type": type(exc).__name__},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail or "Request failed"},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors with readable messages."""
        errors = []
        for err in exc.errors():
            loc = " → ".join(str(part) for part in err.get("loc", []))
            errors.append(f"{loc}: {err.get('msg', 'Invalid value')}")

        logger.warning(
            f"Validation error on {request.method} {request.url.path}: {errors}",
            extra={"path": request.url.path, "error_type": "ValidationError"},
        )
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request", "details": errors},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        """
        Catch-all for unhandled exceptions.
        Logs full details but returns a generic error to the client.
        """
        req_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "An internal error occurred.",
                "request_id": req_id,
            },
        )
