"""Tag outbound LLM requests with Helicone session headers."""

from helicone_session.services.identifier import derive_session_uuid
from helicone_session.services.sanitizer import sanitize_header_value
from helicone_session.services.session_tracker import (
    SESSION_ID_HEADER,
    SESSION_NAME_HEADER,
    SessionTracker,
    TrackingState,
)
from helicone_session.services.transport import (
    SessionHeaderTransport,
    SyncSessionHeaderTransport,
    create_tracked_client,
    wrap_request,
)

__all__ = [
    "SESSION_ID_HEADER",
    "SESSION_NAME_HEADER",
    "SessionHeaderTransport",
    "SessionTracker",
    "SyncSessionHeaderTransport",
    "TrackingState",
    "create_tracked_client",
    "derive_session_uuid",
    "sanitize_header_value",
    "wrap_request",
]
