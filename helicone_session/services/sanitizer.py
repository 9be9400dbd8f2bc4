"""Header Sanitizer - strip characters that could split an HTTP header."""

import re

# CR, LF and the rest of the C0 range, plus DEL
_CONTROL_CHARS = re.compile(r"[\r\n\x00-\x1f\x7f]")


def sanitize_header_value(value: str) -> str:
    """Remove control characters and trim surrounding whitespace."""
    return _CONTROL_CHARS.sub("", value).strip()
