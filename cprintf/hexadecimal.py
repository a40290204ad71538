"""Rendering of ``%x`` and ``%X`` conversions."""

from __future__ import annotations

from collections.abc import Callable

from .basic import format_hex
from .lengths import hex_len
from .spec import WIDTH_FLAG, FormatSpec

_UINT_MASK = 0xFFFFFFFF

Renderer = Callable[[FormatSpec, int, bool], str]


def _pad(fill: str, count: int) -> str:
    """*count* copies of *fill*, or nothing when *count* is not positive."""
    return fill * max(count, 0)


def _remaining(precision: int, length: int) -> int:
    """Precision left after leading zeros have been written."""
    return length if precision > length else precision


def _plain(spec: FormatSpec, value: int, upper: bool) -> str:
    return format_hex(value, upper)


def _left(spec: FormatSpec, value: int, upper: bool) -> str:
    shown = format_hex(value, upper)
    return shown + _pad(" ", spec.first_value - len(shown))


def _width(spec: FormatSpec, value: int, upper: bool) -> str:
    return _pad(" ", spec.first_value - hex_len(value)) + format_hex(value, upper)


def _zero(spec: FormatSpec, value: int, upper: bool) -> str:
    width = spec.first_value
    out = _pad("0", width - hex_len(value))
    if width != 0 or value > 0:
        out += format_hex(value, upper)
    return out


def _sharp(spec: FormatSpec, value: int, upper: bool) -> str:
    prefix = ("0X" if upper else "0x") if value else ""
    return prefix + _left(spec, value, upper)


def _narrowed_width(width: int, precision: int, length: int) -> int:
    if length < precision:
        width -= precision - length
    return width


def _width_dot(spec: FormatSpec, value: int, upper: bool) -> str:
    precision = spec.second_value
    length = hex_len(value)
    width = _narrowed_width(spec.first_value, precision, length)
    out = _pad(" ", width - length) + _pad("0", precision - length)
    if value > 0:
        return out + format_hex(value, upper)
    if _remaining(precision, length) != 0:
        return out + "0"
    return out + " "


def _minus_dot(spec: FormatSpec, value: int, upper: bool) -> str:
    precision = spec.second_value
    length = hex_len(value)
    width = _narrowed_width(spec.first_value, precision, length)
    out = _pad("0", precision - length)
    if value > 0:
        out += format_hex(value, upper)
    elif _remaining(precision, length) != 0:
        out += "0"
    else:
        out += " "
    return out + _pad(" ", width - length)


def _zero_dot(spec: FormatSpec, value: int, upper: bool) -> str:
    precision = spec.second_value
    length = hex_len(value)
    width = _narrowed_width(spec.first_value, precision, length)
    out = _pad(" ", width - length) + _pad("0", precision - length)
    if _remaining(precision, length) != 0:
        return out + format_hex(value, upper)
    return out + " "


def _dot_zero(spec: FormatSpec, value: int, upper: bool) -> str:
    precision = spec.second_value
    if precision == 0 and value > 0:
        return format_hex(value, upper)
    length = hex_len(value)
    out = _pad("0", precision - length)
    if _remaining(precision, length) != 0:
        out += format_hex(value, upper)
    return out


_HEX: dict[tuple[str, str], Renderer] = {
    ("", ""): _plain,
    ("-", ""): _left,
    (WIDTH_FLAG, ""): _width,
    ("0", ""): _zero,
    (".", ""): _zero,
    ("#", ""): _sharp,
    (WIDTH_FLAG, "."): _width_dot,
    ("-", "."): _minus_dot,
    ("0", "."): _zero_dot,
    (".", "0"): _dot_zero,
}


def render_hex(spec: FormatSpec, value: int, upper: bool) -> str:
    """Text of a hexadecimal conversion of a 32-bit unsigned integer."""
    renderer = _HEX.get((spec.first_flag, spec.second_flag), _plain)
    return renderer(spec, value & _UINT_MASK, bool(upper))