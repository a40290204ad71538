"""Rendering of signed and unsigned decimal conversions."""

from __future__ import annotations

from collections.abc import Callable

from .basic import format_decimal
from .decimal_padding import (
    digit_minus_sharp,
    digit_plus_dot,
    digit_space_dot,
    digit_width_dot,
    digit_zero_plus,
)
from .lengths import digit_len
from .spec import WIDTH_FLAG, FormatSpec

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000

Renderer = Callable[[FormatSpec, int], str]


def _pad(fill: str, count: int) -> str:
    """*count* copies of *fill*, or nothing when *count* is not positive."""
    return fill * max(count, 0)


def _to_int(value: int) -> int:
    """Wrap *value* to a signed 32-bit integer."""
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def _to_uint(value: int) -> int:
    """Wrap *value* to an unsigned 32-bit integer."""
    return value & _UINT_MASK


def _plain(spec: FormatSpec, value: int) -> str:
    return format_decimal(value)


def _left(spec: FormatSpec, value: int) -> str:
    shown = format_decimal(value)
    return shown + _pad(" ", spec.first_value - len(shown))


def _zero(spec: FormatSpec, value: int) -> str:
    width = spec.first_value
    sign = ""
    if value < 0:
        sign = "-"
        value = -value
        width -= 1
    return sign + _pad("0", width - digit_len(value)) + format_decimal(value)


def _dot(spec: FormatSpec, value: int) -> str:
    precision = spec.first_value
    sign = ""
    if value < 0:
        sign = "-"
        value = -value
    length = digit_len(value)
    out = sign + _pad("0", precision - length)
    remaining = length if precision > length else precision
    if remaining != 0 or value > 0:
        out += format_decimal(value)
    return out


def _space(spec: FormatSpec, value: int) -> str:
    width = spec.first_value
    negative = value < 0
    magnitude = abs(value)
    length = digit_len(magnitude)
    room = width + 1 if width <= length else width
    out = _pad(" ", room - (length + negative))
    if negative:
        out += "-"
    elif width < length:
        out += " "
    return out + format_decimal(magnitude)


def _plus(spec: FormatSpec, value: int) -> str:
    negative = value < 0
    out = _pad(" ", spec.first_value - (digit_len(value) + 1 - negative))
    if not negative:
        out += "+"
    return out + format_decimal(value)


def _width(spec: FormatSpec, value: int) -> str:
    return _pad(" ", spec.first_value - digit_len(value)) + format_decimal(value)


def _minus_dot(spec: FormatSpec, value: int) -> str:
    width, precision = spec.first_value, spec.second_value
    signed_length = digit_len(value)
    if signed_length < precision:
        width -= precision - signed_length + (1 if value < 0 else 0)
    out = ""
    if value < 0:
        value = -value
        out += "-"
        width -= 1
    length = digit_len(value)
    out += _pad("0", precision - length)
    remaining = length if precision > length else precision
    if remaining != 0 or value > 0:
        out += format_decimal(value)
    else:
        out += " "
    return out + _pad(" ", width - length)


def _dot_zero(spec: FormatSpec, value: int) -> str:
    precision = spec.second_value
    out = ""
    if value < 0:
        value = -value
        out += "-"
    if precision == 0 and value > 0:
        return out + format_decimal(value)
    length = digit_len(value)
    out += _pad("0", precision - length)
    remaining = length if precision > length else precision
    if remaining != 0:
        out += format_decimal(value)
    return out


_SIGNED: dict[tuple[str, str], Renderer] = {
    ("", ""): _plain,
    ("-", ""): _left,
    ("0", ""): _zero,
    (".", ""): _dot,
    (" ", ""): _space,
    ("+", ""): _plus,
    (WIDTH_FLAG, ""): _width,
    ("#", ""): _width,
    (WIDTH_FLAG, "."): digit_width_dot,
    ("0", "."): digit_width_dot,
    ("-", "."): _minus_dot,
    (".", "0"): _dot_zero,
    ("+", "."): digit_plus_dot,
    (" ", "."): digit_space_dot,
    ("0", "+"): digit_zero_plus,
    ("-", "#"): digit_minus_sharp,
}

_UNSIGNED: dict[tuple[str, str], Renderer] = {
    ("", ""): _plain,
    ("-", ""): _left,
    ("0", ""): _zero,
    (".", ""): _dot,
    (WIDTH_FLAG, ""): _width,
    (WIDTH_FLAG, "."): digit_width_dot,
    ("0", "."): digit_width_dot,
    ("-", "."): _minus_dot,
    (".", "0"): _dot_zero,
}


def render_signed(spec: FormatSpec, value: int) -> str:
    """Text of a ``%d`` or ``%i`` conversion of a 32-bit signed integer."""
    renderer = _SIGNED.get((spec.first_flag, spec.second_flag), _plain)
    return renderer(spec, _to_int(value))


def render_unsigned(spec: FormatSpec, value: int) -> str:
    """Text of a ``%u`` conversion of a 32-bit unsigned integer."""
    renderer = _UNSIGNED.get((spec.first_flag, spec.second_flag), _plain)
    return renderer(spec, _to_uint(value))