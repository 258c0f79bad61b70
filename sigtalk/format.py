"""A small printf with the conversions %c %s %p %d %i %u %x %X and %%.

No flags, widths or precisions are understood. An unknown conversion
character prints nothing and consumes no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Callable

__all__ = ["render", "printf"]

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


def _require_int(value: object, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {type(value).__name__}")
    return value


def _as_signed(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: object) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return value.partition("\0")[0]


def _pointer(value: object) -> str:
    if value is None:
        return "(nil)"
    address = _require_int(value, "p") & _ULONG_MASK
    return "(nil)" if address == 0 else f"0x{address:x}"


def _signed(value: object) -> str:
    return str(_as_signed(_require_int(value, "d")))


def _unsigned(value: object) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


def _hex_lower(value: object) -> str:
    return f"{_require_int(value, 'x') & _UINT_MASK:x}"


def _hex_upper(value: object) -> str:
    return f"{_require_int(value, 'X') & _UINT_MASK:X}"


_CONVERSIONS: dict[str, Callable[[object], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def render(fmt: str, *args: object) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Raises TypeError when an argument is missing or of the wrong kind and
    ValueError when the format ends with a lone '%'. Extra arguments are
    ignored.
    """
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(convert(value))
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the rendered text to standard output and return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)