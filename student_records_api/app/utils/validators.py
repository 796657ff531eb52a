"""Name and identifier helpers."""

import re
import secrets
import string
import time

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

_FORBIDDEN_CHARS_RE = re.compile(r"[<>\"'&]")
_TAG_RE = re.compile(r"<[^<>]*>")
_WHITESPACE_RE = re.compile(r"\s+")

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def has_forbidden_chars(value: str) -> bool:
    """True if ``value`` contains one of ``< > " ' &``."""
    return bool(_FORBIDDEN_CHARS_RE.search(value))


def is_valid_name(value) -> bool:
    """Check a student name.

    The trimmed name must be 2 to 50 characters long and free of
    ``< > " ' &``.
    """
    if not value or not isinstance(value, str):
        return False
    trimmed = value.strip()
    if not NAME_MIN_LENGTH <= len(trimmed) <= NAME_MAX_LENGTH:
        return False
    return not has_forbidden_chars(trimmed)


def sanitize_name(value) -> str:
    """Normalise a name for storage.

    Markup tags and the characters ``< > " ' &`` are removed,
    whitespace runs become a single space and the result is trimmed
    and cut to ``NAME_MAX_LENGTH`` characters.
    """
    if not value or not isinstance(value, str):
        return ""
    cleaned = _TAG_RE.sub("", value)
    cleaned = _FORBIDDEN_CHARS_RE.sub("", cleaned)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    return cleaned[:NAME_MAX_LENGTH].rstrip()


def generate_student_id() -> str:
    """Return a new opaque student id.

    Millisecond clock in base 36 followed by 64 random bits in base 36.
    """
    millis = time.time_ns() // 1_000_000
    return _to_base36(millis) + _to_base36(secrets.randbits(64))


def is_valid_student_id(value) -> bool:
    return isinstance(value, str) and len(value) > 0
