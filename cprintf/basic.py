"""Plain conversions of values to their printed text."""

from __future__ import annotations

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_ULONG_MASK = (1 << 64) - 1
NULL_TEXT = "(null)"


def format_decimal(value: int) -> str:
    """Decimal text of *value*, with a leading minus when negative."""
    if value < 0:
        return "-" + format_decimal(-value)
    return str(value)


def format_hex(value: int, upper: bool) -> str:
    """Hexadecimal digits of *value* taken as an unsigned 64-bit number."""
    value &= _ULONG_MASK
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_pointer(value: int) -> str:
    """Pointer text: ``0x`` followed by lower-case hex digits."""
    if not value:
        return "0x0"
    return "0x" + format_hex(value, False)


def format_string(text: str | None) -> str:
    """The string itself, or ``(null)`` when it is missing."""
    return NULL_TEXT if text is None else text