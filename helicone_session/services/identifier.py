"""Identifier Deriver - map an opaque session id onto a stable pseudo-UUID."""

import hashlib
import re

PSEUDO_UUID_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")

# 8-4-4-4-12 slices of the 32 hex digit body
_GROUPS = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))


def hash64(value: str) -> int:
    """64-bit unsigned hash of a string, stable across processes."""
    digest = hashlib.blake2b(value.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "big")


def derive_session_uuid(session_id: str) -> str:
    """
    Convert a session id to a deterministic UUID-shaped string.

    The 16 hex digits of the hash are repeated to fill the 32 digit body, so
    the second half always mirrors the first. No version or variant bits are
    set. Identifiers correlated downstream depend on this exact layout.
    """
    hash_hex = format(hash64(session_id), "016x")
    full_hex = (hash_hex + hash_hex)[:32]
    return "-".join(full_hex[start:end] for start, end in _GROUPS)


def is_pseudo_uuid(value: str) -> bool:
    return bool(PSEUDO_UUID_PATTERN.match(value))
