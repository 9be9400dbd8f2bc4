"""Event routes - session lifecycle notifications delivered by the host."""

from typing import Any

from fastapi import APIRouter, Body, Depends

import structlog

from helicone_session.api.dependencies import get_tracker
from helicone_session.models.schemas import EventAckResponse, TrackingStateResponse
from helicone_session.services.session_tracker import SessionTracker

logger = structlog.get_logger()
router = APIRouter()


@router.post("/events", response_model=EventAckResponse)
async def receive_event(
    event: dict[str, Any] = Body(..., description="Host event payload"),
    tracker: SessionTracker = Depends(get_tracker),
):
    """
    Accept any host event. Session created/updated events refresh the
    tracking state; everything else is acknowledged and ignored.
    """
    handled = tracker.handle_raw_event(event)
    if not handled:
        logger.debug("Ignored non-session event", event_type=event.get("type"))

    state = tracker.state
    return EventAckResponse(
        handled=handled,
        session_id=state.session_id,
        session_name=state.session_name,
    )


@router.get("/session", response_model=TrackingStateResponse)
async def get_session_state(tracker: SessionTracker = Depends(get_tracker)):
    """Current derived session headers."""
    state = tracker.state
    return TrackingStateResponse(
        session_id=state.session_id,
        session_name=state.session_name,
        active=state.active,
    )
