"""String helpers with the semantics of the classic C string routines.

Only the behaviour that makes sense for Python strings is kept: results are
new strings or lists, "not found" is ``None``, and invalid arguments raise.
"""

from __future__ import annotations

__all__ = [
    "isspace",
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_INT_BITS = 32


def _to_c_int(value: int) -> int:
    """Wrap an integer to a 32-bit two's-complement value."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _c_string(text: str) -> str:
    """Return the part of ``text`` before the first NUL character."""
    return text.partition("\0")[0]


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def isspace(ch: str) -> bool:
    """Return True if ``ch`` is one of space, \\t, \\n, \\v, \\f or \\r."""
    return len(ch) == 1 and ch in _WHITESPACE


def atoi(text: str) -> int:
    """Convert the leading integer of ``text``.

    Leading whitespace is skipped, then one optional sign, then decimal
    digits up to the first non-digit. Text without digits yields 0. The
    result wraps like a 32-bit signed integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _to_c_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text yields an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match onwards, the whole
    haystack for an empty needle, or None when there is no match that ends
    within the bound.
    """
    _require_non_negative("length", length)
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    if index < 0:
        return None
    return haystack[index:]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Comparison stops at a NUL character. Returns -1, 0 or 1.
    """
    _require_non_negative("n", n)
    a = _c_string(s1)[:n]
    b = _c_string(s2)[:n]
    return (a > b) - (a < b)