"""Padded decimal output for conversions that carry two flags.

Each function renders a signed value according to the widths held in a
:class:`FormatSpec`: ``first_value`` is the field width and
``second_value`` the precision of the second flag.
"""

from __future__ import annotations

from .basic import format_decimal
from .lengths import digit_len
from .spec import FormatSpec


def _pad(fill: str, count: int) -> str:
    """*count* copies of *fill*, or nothing when *count* is not positive."""
    return fill * max(count, 0)


def _zero_gap(value: int, width: int, precision: int) -> str:
    """The blank a zero value leaves behind when no precision covers it."""
    if not value and width - precision > digit_len(value) and not (
        width > 0 and precision > 0
    ):
        return " "
    return ""


def _shows_digits(value: int, width: int, precision: int) -> bool:
    return bool(value) or (width > precision and precision != 0)


def _wide_short(spec: FormatSpec, value: int, sign: str) -> str:
    """Width above precision, precision shorter than the number."""
    width, precision = spec.first_value, spec.second_value
    negative = value < 0
    magnitude = abs(value)
    out = _pad(" ", width - (digit_len(magnitude) + 1))
    out += _zero_gap(magnitude, width, precision)
    out += "-" if negative else sign
    if _shows_digits(magnitude, width, precision):
        out += format_decimal(magnitude)
    return out


def _wide_long(spec: FormatSpec, value: int, sign: str) -> str:
    """Width above precision, precision long enough for the number."""
    width, precision = spec.first_value, spec.second_value
    negative = value < 0
    magnitude = abs(value)
    out = _pad(" ", width - (precision + 1))
    out += _zero_gap(magnitude, width, precision)
    out += "-" if negative else sign
    out += _pad("0", precision - digit_len(magnitude))
    if _shows_digits(magnitude, width, precision):
        out += format_decimal(magnitude)
    return out


def _no_sizes(spec: FormatSpec, value: int, sign: str) -> str:
    """Neither width nor precision given."""
    negative = value < 0
    magnitude = abs(value)
    out = _pad(" ", spec.first_value - (digit_len(magnitude) + 1))
    out += "-" if negative else sign
    if magnitude:
        out += format_decimal(magnitude)
    return out


def _narrow_long(spec: FormatSpec, value: int, sign: str, zero_bias: int = 0) -> str:
    """Width at most the precision, precision long enough for the number."""
    negative = value < 0
    magnitude = abs(value)
    out = _pad(" ", spec.first_value - spec.second_value)
    out += "-" if negative else sign
    out += _pad("0", spec.second_value - (digit_len(magnitude) + zero_bias))
    out += format_decimal(magnitude)
    return out


def _narrow_short(spec: FormatSpec, value: int, sign: str) -> str:
    """Width at most the precision, precision shorter than the number."""
    negative = value < 0
    magnitude = abs(value)
    out = _pad(" ", spec.first_value - digit_len(magnitude))
    out += "-" if negative else sign
    out += format_decimal(magnitude)
    return out


def digit_space_dot(spec: FormatSpec, value: int) -> str:
    """Render a value for a space flag followed by a precision."""
    width, precision = spec.first_value, spec.second_value
    needed = digit_len(value) + (value < 0)
    if width > precision:
        if precision < needed:
            return _wide_short(spec, value, " ")
        return _wide_long(spec, value, " ")
    if not width and not precision:
        return _no_sizes(spec, value, " ")
    if precision >= needed:
        return _narrow_long(spec, value, " ")
    return _narrow_short(spec, value, " ")


def digit_plus_dot(spec: FormatSpec, value: int) -> str:
    """Render a value for a plus flag followed by a precision."""
    width, precision = spec.first_value, spec.second_value
    needed = digit_len(value) + (value < 0)
    if width > precision:
        if precision < needed:
            return _wide_short(spec, value, "+")
        return _wide_long(spec, value, "+")
    if not width and not precision:
        return _wide_short(spec, value, "+")
    if precision >= needed:
        return _no_sizes(spec, value, "+")
    return _narrow_long(spec, value, "+")


def _zero_plus_no_sizes(spec: FormatSpec, value: int) -> str:
    # The sign is written and the value keeps its own minus as well.
    out = _pad(" ", spec.first_value - (digit_len(value) + 1))
    out += "-" if value < 0 else "+"
    if value:
        out += format_decimal(value)
    return out


def digit_zero_plus(spec: FormatSpec, value: int) -> str:
    """Render a value for a zero flag followed by a plus flag."""
    width, precision = spec.first_value, spec.second_value
    length = digit_len(value)
    if width > precision:
        if precision < length:
            return _wide_short(spec, value, "+")
        return _wide_long(spec, value, " ")
    if not width and not precision:
        return _zero_plus_no_sizes(spec, value)
    if precision >= length:
        return _narrow_long(spec, value, "+", zero_bias=1)
    return _narrow_short(spec, value, "+")


def _width_dot_wide_short(spec: FormatSpec, value: int) -> str:
    width, precision = spec.first_value, spec.second_value
    negative = value < 0
    magnitude = abs(value)
    out = _pad(" ", width - (digit_len(magnitude) + negative))
    if negative:
        out += "-"
    if magnitude == 0 and precision != digit_len(magnitude):
        out += " "
    if _shows_digits(magnitude, width, precision):
        out += format_decimal(magnitude)
    return out


def _width_dot_wide_long(spec: FormatSpec, value: int) -> str:
    width, precision = spec.first_value, spec.second_value
    negative = value < 0
    magnitude = abs(value)
    out = _pad(" ", width - (precision + negative))
    out += _zero_gap(magnitude, width, precision)
    if negative:
        out += "-"
    out += _pad("0", precision - digit_len(magnitude))
    if _shows_digits(magnitude, width, precision):
        out += format_decimal(magnitude)
    return out


def digit_width_dot(spec: FormatSpec, value: int) -> str:
    """Render a value for a field width followed by a precision."""
    width, precision = spec.first_value, spec.second_value
    length = digit_len(value)
    if width > precision:
        if precision < length:
            return _width_dot_wide_short(spec, value)
        return _width_dot_wide_long(spec, value)
    if not width and not precision:
        return _no_sizes(spec, value, "")
    if precision >= length:
        return _narrow_long(spec, value, "")
    return _narrow_short(spec, value, "")


def digit_minus_sharp(spec: FormatSpec, value: int) -> str:
    """Render a value left-aligned in the width given after a ``#`` flag."""
    shown = format_decimal(value)
    return shown + _pad(" ", spec.second_value - len(shown))