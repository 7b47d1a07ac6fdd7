"""Small string utilities: ASCII upper-casing and bounded printf-style formatting."""

from __future__ import annotations

import string

MAX_LENGTH = 1022

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters upper-cased; other characters unchanged."""
    return text.translate(_UPPER)


def format_string(fmt: str, *args: object) -> str:
    """Apply printf-style formatting, truncating the result to MAX_LENGTH characters."""
    return (fmt % args)[:MAX_LENGTH]