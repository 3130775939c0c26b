"""Identifier format, validation, and generation.

IDs are 16 lowercase hex characters encoding a non-zero 64-bit integer.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import re
import secrets

ID_LENGTH = 16
ID_PATTERN: re.Pattern[str] = re.compile(r"[0-9a-f]{16}")

_ZERO_ID = "0" * ID_LENGTH


def validate_id(raw: str) -> bool:
    """Check whether *raw* is a well-formed, non-zero ID."""
    if not isinstance(raw, str):
        return False
    return ID_PATTERN.fullmatch(raw) is not None and raw != _ZERO_ID


def generate_id() -> str:
    """Generate a random, valid ID."""
    value = 0
    while value == 0:
        value = secrets.randbits(64)
    return f"{value:016x}"
