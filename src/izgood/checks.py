"""Built-in checks.

A check takes the resolved value (``None`` when the field is absent)
and answers with ``True``/``None`` for valid, ``False`` for invalid, or a
string explaining why the value is invalid::

    def no_spaces(value: object) -> str | None:
        if isinstance(value, str) and " " in value:
            return "Must not contain spaces"
        return None

Parameterized checks are factories that return a check::

    def max_length(n: int) -> Check:
        def check(value): ...
        return check

Every built-in treats an absent value as invalid. Wrap a check in
``optional`` to let absent or blank values through.
"""

import re
from collections.abc import Sized
from typing import Any

from izgood.http.forms import UploadFile
from izgood.result import CheckResult
from izgood.rules import Check

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def not_empty(value: Any) -> bool:
    """Value must be present: non-blank text, a non-empty upload or
    a non-empty collection.
    """
    match value:
        case str():
            return bool(value.strip())
        case UploadFile():
            return value.size > 0
        case None | bool() | int() | float():
            return False
        case Sized():
            return len(value) > 0
        case _:
            return False


def optional(check: Check) -> Check:
    """Run *check* only when a value is present; absent or blank passes."""

    def wrapped(value: Any) -> CheckResult:
        if _is_blank(value):
            return True
        return check(value)

    return wrapped


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------

# Structure only, not deliverability
_EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")


def email(value: Any) -> bool:
    """Value must look like an email address."""
    return isinstance(value, str) and _EMAIL_RE.match(value) is not None


# Scheme + host structure
_URL_RE = re.compile(r"^https?://[^\s/$.?#].\S*$", re.IGNORECASE)


def url(value: Any) -> str | None:
    """Value must be an http(s) URL."""
    if not isinstance(value, str) or not _URL_RE.match(value):
        return "Must be a valid URL"
    return None


def matches(pattern: str, message: str | None = None) -> Check:
    """Value must match the regex *pattern*."""
    compiled = re.compile(pattern)

    def check(value: Any) -> str | None:
        if not isinstance(value, str) or not compiled.match(value):
            return message or f"Must match pattern: {pattern}"
        return None

    return check


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int) -> Check:
    """Text must be at most *n* characters."""

    def check(value: Any) -> str | None:
        if not isinstance(value, str) or len(value) > n:
            return f"Must be at most {n} characters"
        return None

    return check


def min_length(n: int) -> Check:
    """Text must be at least *n* characters."""

    def check(value: Any) -> str | None:
        if not isinstance(value, str) or len(value) < n:
            return f"Must be at least {n} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Check:
    """Value must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: Any) -> str | None:
        if not isinstance(value, str) or value not in allowed:
            options = ", ".join(sorted(allowed))
            return f"Must be one of: {options}"
        return None

    return check


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def _as_int(value: Any) -> int | float | None:
    """Numbers pass through; text yields its leading integer, if any."""
    match value:
        case bool():
            return None
        case int() | float():
            return value
        case str():
            found = _LEADING_INT_RE.match(value)
            return int(found.group(1)) if found else None
        case _:
            return None


def more_than(minimum: int | float) -> Check:
    """Value must be a number strictly greater than *minimum*.

    Text is read up to the first non-digit, so ``"18 years"`` counts
    as 18.
    """

    def check(value: Any) -> bool:
        number = _as_int(value)
        return number is not None and number > minimum

    return check


def less_than(maximum: int | float) -> Check:
    """Value must be a number strictly less than *maximum*."""

    def check(value: Any) -> bool:
        number = _as_int(value)
        return number is not None and number < maximum

    return check


def integer(value: Any) -> str | None:
    """Value must be a whole number."""
    try:
        int(value)
    except (ValueError, TypeError):
        return "Must be a whole number"
    return None


def number(value: Any) -> str | None:
    """Value must be a number (int or float)."""
    try:
        float(value)
    except (ValueError, TypeError):
        return "Must be a number"
    return None
