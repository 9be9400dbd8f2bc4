"""Tests for header value sanitization."""

import pytest

from helicone_session.services.sanitizer import sanitize_header_value

CONTROL_CHARS = {chr(c) for c in range(0x20)} | {"\x7f"}


class TestSanitizeHeaderValue:

    def test_plain_value_unchanged(self):
        assert sanitize_header_value("My Session") == "My Session"

    @pytest.mark.parametrize("value", ["", "   \n\t  ", "\r\n", "\x00\x1f\x7f"])
    def test_degenerate_input_becomes_empty(self, value):
        assert sanitize_header_value(value) == ""

    def test_header_injection_removed(self):
        value = sanitize_header_value("Fix bug\r\nX-Injected: yes")
        assert "\r" not in value and "\n" not in value
        assert value == "Fix bugX-Injected: yes"

    def test_trims_after_stripping(self):
        assert sanitize_header_value("\x00  padded title \t\x7f") == "padded title"

    def test_inner_spaces_kept(self):
        assert sanitize_header_value("a  b") == "a  b"

    @pytest.mark.parametrize("value", [
        "normal",
        " \x01leading control",
        "tab\tinside",
        "\x7fdel at start and end\x7f",
        "".join(chr(c) for c in range(0x80)),
        "unicode ✓ title\n",
    ])
    def test_output_properties(self, value):
        cleaned = sanitize_header_value(value)
        assert not CONTROL_CHARS.intersection(cleaned)
        assert cleaned == cleaned.strip()
        assert sanitize_header_value(cleaned) == cleaned
