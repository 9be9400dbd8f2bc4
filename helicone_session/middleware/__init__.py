from helicone_session.middleware.request_id import RequestIDMiddleware
from helicone_session.middleware.logging_mw import RequestLoggingMiddleware
from helicone_session.middleware.error_handler import register_exception_handlers

__all__ = [
    "RequestIDMiddleware",
    "RequestLoggingMiddleware",
    "register_exception_handlers",
]
