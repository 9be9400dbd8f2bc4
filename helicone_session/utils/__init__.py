from helicone_session.utils.logging import setup_logging, request_id_var

__all__ = ["setup_logging", "request_id_var"]
