"""
Request wrapping - injects Helicone session headers into outbound requests.

Two seams are provided:
- httpx transports that decorate an inner transport, for handing a ready
  client to a provider SDK (``http_client=create_tracked_client(tracker)``)
- ``wrap_request``, a fetch-style function ``(url, **options) -> response``
  for hosts that want a bare callable.

Neither catches transport errors; they reach the caller unchanged.
"""

from typing import Any, Awaitable, Callable

import httpx
import structlog

from helicone_session.config import Settings, get_settings
from helicone_session.services.session_tracker import HeaderTypes, SessionTracker

logger = structlog.get_logger()

SendFn = Callable[..., Awaitable[httpx.Response]]


def _tag_request(tracker: SessionTracker, request: httpx.Request) -> httpx.Request:
    """Return the request with session headers merged in. Same URL, method and body."""
    headers = tracker.apply_headers(request.headers)
    if headers.raw == request.headers.raw:
        return request
    request.headers = headers
    logger.debug("Tagged outbound request", method=request.method, host=request.url.host)
    return request


class SessionHeaderTransport(httpx.AsyncBaseTransport):
    """Async transport decorator adding the tracker's session headers."""

    def __init__(self, tracker: SessionTracker, transport: httpx.AsyncBaseTransport | None = None):
        self.tracker = tracker
        self._transport = transport or httpx.AsyncHTTPTransport()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        return await self._transport.handle_async_request(_tag_request(self.tracker, request))

    async def aclose(self) -> None:
        await self._transport.aclose()


class SyncSessionHeaderTransport(httpx.BaseTransport):
    """Blocking counterpart of SessionHeaderTransport."""

    def __init__(self, tracker: SessionTracker, transport: httpx.BaseTransport | None = None):
        self.tracker = tracker
        self._transport = transport or httpx.HTTPTransport()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        return self._transport.handle_request(_tag_request(self.tracker, request))

    def close(self) -> None:
        self._transport.close()


def wrap_request(tracker: SessionTracker, send: SendFn) -> SendFn:
    """
    Build a fetch-style callable around ``send`` (e.g. ``AsyncClient.request``).

    The returned coroutine function forwards url, method, body and any other
    options untouched; only the headers are augmented, and headers the caller
    passed always take precedence over the tracked session.
    """

    async def fetch(
        url: httpx.URL | str,
        *,
        method: str = "GET",
        headers: HeaderTypes = None,
        **options: Any,
    ) -> httpx.Response:
        return await send(method, url, headers=tracker.apply_headers(headers), **options)

    return fetch


def create_tracked_client(
    tracker: SessionTracker,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    **client_kwargs: Any,
) -> httpx.AsyncClient:
    """AsyncClient pointed at the Helicone gateway that tags every request."""
    settings = settings or get_settings()
    client_kwargs.setdefault("base_url", settings.helicone_base_url)
    client_kwargs.setdefault("timeout", settings.request_timeout)
    logger.info(
        "Creating tracked HTTP client",
        base_url=str(client_kwargs["base_url"]),
    )
    return httpx.AsyncClient(
        transport=SessionHeaderTransport(tracker, transport),
        **client_kwargs,
    )
