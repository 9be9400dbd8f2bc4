"""Pydantic schemas for host events and API responses."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


# ── Host Session ───────────────────────────────────────────────────────────

class Session(BaseModel):
    """Session as reported by the host. Unknown host fields are ignored."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str | None = None


# ── Session Lifecycle Events ───────────────────────────────────────────────

SESSION_CREATED = "session.created"
SESSION_UPDATED = "session.updated"
SESSION_EVENT_TYPES = frozenset({SESSION_CREATED, SESSION_UPDATED})


class SessionEventProperties(BaseModel):
    info: Session


class SessionCreatedEvent(BaseModel):
    type: Literal["session.created"] = SESSION_CREATED
    properties: SessionEventProperties


class SessionUpdatedEvent(BaseModel):
    type: Literal["session.updated"] = SESSION_UPDATED
    properties: SessionEventProperties


SessionEvent = Annotated[
    Union[SessionCreatedEvent, SessionUpdatedEvent],
    Field(discriminator="type"),
]

session_event_adapter: TypeAdapter[SessionEvent] = TypeAdapter(SessionEvent)


# ── API Responses ──────────────────────────────────────────────────────────

class TrackingStateResponse(BaseModel):
    session_id: str
    session_name: str
    active: bool


class EventAckResponse(BaseModel):
    handled: bool
    session_id: str
    session_name: str
