"""Shared API dependencies."""

from fastapi import Request

from helicone_session.services.session_tracker import SessionTracker


def get_tracker(request: Request) -> SessionTracker:
    """The tracker owned by the running application."""
    return request.app.state.tracker
