"""Formatting of whole format strings and writing them out."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from .decimal import render_signed, render_unsigned
from .hexadecimal import render_hex
from .spec import FormatSpec, parse_spec
from .text import render_char, render_percent, render_pointer, render_string

_MISSING = object()


def _next_argument(values: Iterator[Any]) -> Any:
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError("not enough arguments for format string")
    return value


def _convert(spec: FormatSpec, values: Iterator[Any]) -> str:
    conversion = spec.conversion
    if conversion == "%":
        return render_percent(spec)
    if not conversion:
        return ""
    value = _next_argument(values)
    if conversion == "c":
        return render_char(spec, value)
    if conversion == "s":
        return render_string(spec, value)
    if conversion == "p":
        return render_pointer(spec, 0 if value is None else value)
    if conversion in ("d", "i"):
        return render_signed(spec, value)
    if conversion == "u":
        return render_unsigned(spec, value)
    return render_hex(spec, value, conversion == "X")


def render(fmt: str | None, *args: Any) -> str:
    """Format *args* according to *fmt* and return the text.

    A missing format gives an empty string; unknown conversions produce
    nothing and take no argument.
    """
    if fmt is None:
        return ""
    values = iter(args)
    parts = []
    pos = 0
    while pos < len(fmt):
        start = fmt.find("%", pos)
        if start < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:start])
        spec, end = parse_spec(fmt, start)
        parts.append(_convert(spec, values))
        pos = end + 1
    return "".join(parts)


def printf(fmt: str | None, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)