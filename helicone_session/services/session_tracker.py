"""
Session Tracking - follows the host's active session and derives the
Helicone session headers from it.

The tracker is owned by whoever builds the tracked HTTP client and is passed
explicitly to the transport layer and the event API. Its derived state is a
single immutable snapshot, replaced in one assignment, so a request never sees
the id of one session paired with the name of another.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional, assert_never

import httpx
import structlog
from pydantic import ValidationError

from helicone_session.core.exceptions import InvalidEventError
from helicone_session.models.schemas import (
    SESSION_EVENT_TYPES,
    Session,
    SessionCreatedEvent,
    SessionEvent,
    SessionUpdatedEvent,
    session_event_adapter,
)
from helicone_session.services.identifier import derive_session_uuid
from helicone_session.services.sanitizer import sanitize_header_value

logger = structlog.get_logger()

SESSION_ID_HEADER = "Helicone-Session-Id"
SESSION_NAME_HEADER = "Helicone-Session-Name"

HeaderTypes = Optional[httpx.Headers | Mapping[str, str] | list[tuple[str, str]]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TrackingState:
    """Derived headers for the most recently observed session."""

    session_id: str = ""
    session_name: str = ""

    @property
    def active(self) -> bool:
        return bool(self.session_id)


EMPTY_STATE = TrackingState()


class SessionTracker:
    """Holds the current session and turns it into request headers."""

    def __init__(
        self,
        fallback_prefix: str = "Session",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.fallback_prefix = fallback_prefix
        self._clock = clock
        self._session: Session | None = None
        self._state: TrackingState = EMPTY_STATE

    @property
    def current_session(self) -> Session | None:
        return self._session

    @property
    def state(self) -> TrackingState:
        return self._state

    def fallback_label(self) -> str:
        """Label for an untitled session, e.g. 'Session 2026-10-16T12:00:00.000Z'."""
        timestamp = self._clock().astimezone(timezone.utc).isoformat(timespec="milliseconds")
        return f"{self.fallback_prefix} {timestamp.replace('+00:00', 'Z')}"

    def on_session(self, session: Session | None) -> TrackingState:
        """Record a created/updated session and recompute the derived headers."""
        if session is None:
            return self._state

        self._session = session
        name = sanitize_header_value(session.title or "")
        if not name:
            name = sanitize_header_value(self.fallback_label())

        self._state = TrackingState(
            session_id=derive_session_uuid(session.id),
            session_name=name,
        )
        logger.info(
            "Session tracking updated",
            session_id=self._state.session_id,
            titled=bool(session.title),
        )
        return self._state

    def handle_event(self, event: SessionEvent) -> bool:
        """Apply a parsed session lifecycle event."""
        match event:
            case SessionCreatedEvent(properties=props) | SessionUpdatedEvent(properties=props):
                logger.debug("Session event received", event_type=event.type)
                self.on_session(props.info)
                return True
            case _:
                assert_never(event)

    def handle_raw_event(self, payload: Mapping) -> bool:
        """
        Parse and apply a host event payload.

        Returns False for event types other than session created/updated.
        Raises InvalidEventError when a session event does not validate.
        """
        event_type = payload.get("type")
        if not isinstance(event_type, str) or event_type not in SESSION_EVENT_TYPES:
            return False

        try:
            event = session_event_adapter.validate_python(payload)
        except ValidationError as e:
            logger.warning("Rejected malformed session event", event_type=event_type, errors=e.error_count())
            raise InvalidEventError(event_type, str(e)) from e

        return self.handle_event(event)

    def apply_headers(self, headers: HeaderTypes = None) -> httpx.Headers:
        """
        Copy headers and add the Helicone session headers that are missing.

        Headers the caller already set (any case) are never overridden.
        """
        merged = httpx.Headers(headers)
        state = self._state

        additions = []
        if state.session_id and SESSION_ID_HEADER not in merged:
            additions.append((SESSION_ID_HEADER, state.session_id))
        if state.session_name and SESSION_NAME_HEADER not in merged:
            additions.append((SESSION_NAME_HEADER, state.session_name))
        if not additions:
            return merged

        # Titles may be non-ASCII; send them as UTF-8 whatever encoding the
        # caller's headers were detected with
        raw = list(merged.raw)
        raw.extend((name.encode("ascii"), value.encode("utf-8")) for name, value in additions)
        return httpx.Headers(raw)

    def reset(self) -> None:
        self._session = None
        self._state = EMPTY_STATE
