"""Rendering of character, string, percent and pointer conversions."""

from __future__ import annotations

from .basic import NULL_TEXT, format_pointer, format_string
from .lengths import ptr_len, str_len
from .spec import WIDTH_FLAG, FormatSpec

_ULONG_MASK = (1 << 64) - 1


def _pad(fill: str, count: int) -> str:
    """*count* copies of *fill*, or nothing when *count* is not positive."""
    return fill * max(count, 0)


def truncated_null(limit: int) -> str:
    """At most *limit* leading characters of ``(null)``."""
    return NULL_TEXT[: max(limit, 0)]


def truncated_string(text: str | None, limit: int) -> str:
    """At most *limit* leading characters of *text*.

    A missing string is shown as a truncated ``(null)``; a negative limit
    leaves the string whole.
    """
    if text is None:
        return truncated_null(limit)
    if limit < 0:
        return text
    return text[:limit]


def _as_char(char: str | int) -> str:
    """Turn a character argument into a one-character string."""
    if isinstance(char, int):
        return chr(char % 256)
    return char[:1]


def render_char(spec: FormatSpec, char: str | int) -> str:
    """Text of a ``%c`` conversion."""
    c = _as_char(char)
    first, second = spec.first_flag, spec.second_flag
    if first in ("", ".") and second == "":
        return c
    if first == "-" and second == "":
        return c + _pad(" ", spec.first_value - 1)
    if first == WIDTH_FLAG and second in ("", "."):
        return _pad(" ", spec.first_value - 1) + c
    return c


def _string_dot(spec: FormatSpec, text: str | None) -> str:
    if text is None:
        return truncated_null(spec.first_value)
    return text[: max(spec.first_value, 0)]


def render_string(spec: FormatSpec, text: str | None) -> str:
    """Text of a ``%s`` conversion; ``None`` stands for a missing string."""
    first, second = spec.first_flag, spec.second_flag
    shown = format_string(text)
    length = str_len(text)
    if first == "" and second == "":
        return shown
    if first in ("-", " ") and second == "":
        return shown + _pad(" ", spec.first_value - length)
    if first == "." and second in ("", "0"):
        return _string_dot(spec, text)
    if first == WIDTH_FLAG and second == "":
        return _pad(" ", spec.first_value - length) + shown
    if first == WIDTH_FLAG and second == ".":
        precision = min(spec.second_value, length)
        return _pad(" ", spec.first_value - precision) + truncated_string(
            text, precision
        )
    if first == "-" and second == ".":
        precision = min(spec.second_value, length)
        return truncated_string(text, precision) + _pad(
            " ", spec.first_value - precision
        )
    return shown


def render_percent(spec: FormatSpec) -> str:
    """Text of a ``%%`` conversion."""
    first, second = spec.first_flag, spec.second_flag
    if second == "":
        if first == WIDTH_FLAG:
            return _pad(" ", spec.first_value - 1) + "%"
        if first == "-":
            return "%" + _pad(" ", spec.first_value - 1)
        if first == "0":
            return _pad("0", spec.first_value - 1) + "%"
    return "%"


def render_pointer(spec: FormatSpec, value: int) -> str:
    """Text of a ``%p`` conversion of an unsigned 64-bit address."""
    value &= _ULONG_MASK
    shown = format_pointer(value)
    first, second = spec.first_flag, spec.second_flag
    if second == "":
        if first == "-":
            return shown + _pad(" ", spec.first_value - len(shown))
        if first in (WIDTH_FLAG, " "):
            return _pad(" ", spec.first_value - ptr_len(value)) + shown
    return shown