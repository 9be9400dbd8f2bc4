"""Custom exceptions for the session tagger."""


class HeliconeSessionError(Exception):
    """Base exception for the session tagger."""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidEventError(HeliconeSessionError):
    """A session lifecycle event whose payload could not be parsed."""
    def __init__(self, event_type: str, detail: str):
        self.event_type = event_type
        super().__init__(f"Invalid {event_type} event: {detail}", status_code=422)
