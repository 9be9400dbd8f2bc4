"""
Logs every event-API request with method, path, status code, and duration.
Skips health check to reduce noise.
"""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("api.access")

SKIP_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        extra = {"method": request.method, "path": request.url.path, "client_ip": client_ip}

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = round((time.perf_counter() - start) * 1000)
            logger.error(
                f"{request.method} {request.url.path} → 500 ({duration_ms}ms) {type(e).__name__}: {e}",
                extra={**extra, "status_code": 500, "duration_ms": duration_ms, "error_type": type(e).__name__},
            )
            raise

        duration_ms = round((time.perf_counter() - start) * 1000)
        log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(
            log_level,
            f"{request.method} {request.url.path} → {response.status_code} ({duration_ms}ms)",
            extra={**extra, "status_code": response.status_code, "duration_ms": duration_ms},
        )
        return response
