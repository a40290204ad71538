import pytest

from cprintf.spec import FormatSpec, parse_spec
from cprintf.text import (
    render_char,
    render_percent,
    render_pointer,
    render_string,
    truncated_null,
    truncated_string,
)


def spec_of(fmt):
    spec, _ = parse_spec(fmt, 0)
    return spec


def test_truncated_null_full_and_empty():
    assert truncated_null(10) == "(null)"
    assert truncated_null(6) == "(null)"
    assert truncated_null(0) == ""
    assert truncated_null(-2) == ""


@pytest.mark.parametrize("limit", [1, 2, 3, 4, 5])
def test_truncated_null_is_prefix(limit):
    result = truncated_null(limit)
    assert len(result) == limit
    assert "(null)".startswith(result)


def test_truncated_string():
    assert truncated_string("hello", 2) == "he"
    assert truncated_string("hello", 50) == "hello"
    assert truncated_string("hello", 0) == ""
    assert truncated_string(None, 6) == "(null)"
    assert truncated_string(None, 3) == truncated_null(3)


def test_char_plain_and_dot():
    assert render_char(spec_of("%c"), "a") == "a"
    assert render_char(spec_of("%.c"), "z") == "z"
    assert render_char(FormatSpec("c"), 65) == "A"


def test_char_width_right_aligns():
    result = render_char(spec_of("%5c"), "a")
    assert len(result) == 5
    assert result.endswith("a")
    assert result.strip() == "a"


def test_char_minus_left_aligns():
    result = render_char(spec_of("%-5c"), "a")
    assert len(result) == 5
    assert result.startswith("a")
    assert result.strip() == "a"


def test_char_width_one_is_bare():
    assert render_char(spec_of("%1c"), "q") == "q"


def test_string_plain_and_null():
    assert render_string(spec_of("%s"), "abc") == "abc"
    assert render_string(spec_of("%s"), None) == "(null)"


def test_string_width_and_minus():
    right = render_string(spec_of("%10s"), "abc")
    left = render_string(spec_of("%-10s"), "abc")
    assert len(right) == len(left) == 10
    assert right.endswith("abc") and right.strip() == "abc"
    assert left.startswith("abc") and left.strip() == "abc"


def test_string_width_smaller_than_text():
    assert render_string(spec_of("%2s"), "abcdef") == "abcdef"
    assert render_string(spec_of("%-2s"), "abcdef") == "abcdef"


def test_string_precision():
    assert render_string(spec_of("%.3s"), "abcdef") == "abc"
    assert render_string(spec_of("%.s"), "abcdef") == ""
    assert render_string(spec_of("%.3s"), None) == truncated_null(3)


def test_string_width_precision():
    result = render_string(spec_of("%8.3s"), "abcdef")
    assert len(result) == 8
    assert result.strip() == "abc"
    assert result.endswith("abc")
    left = render_string(spec_of("%-8.3s"), "abcdef")
    assert len(left) == 8
    assert left.startswith("abc")


def test_string_width_precision_null():
    result = render_string(spec_of("%10.2s"), None)
    assert len(result) == 10
    assert result.strip() == truncated_null(2)


def test_percent_variants():
    assert render_percent(spec_of("%%")) == "%"
    right = render_percent(spec_of("%5%"))
    assert len(right) == 5 and right.strip() == "%" and right.endswith("%")
    left = render_percent(spec_of("%-5%"))
    assert len(left) == 5 and left.startswith("%")
    zero = render_percent(spec_of("%05%"))
    assert len(zero) == 5 and zero.endswith("%") and set(zero[:-1]) == {"0"}


def test_pointer_plain():
    assert render_pointer(spec_of("%p"), 0) == "0x0"
    plain = render_pointer(spec_of("%p"), 255)
    assert plain.startswith("0x")
    assert int(plain, 16) == 255


def test_pointer_width_and_minus():
    plain = render_pointer(spec_of("%p"), 0xABCDEF)
    right = render_pointer(spec_of("%20p"), 0xABCDEF)
    left = render_pointer(spec_of("%-20p"), 0xABCDEF)
    assert len(right) == len(left) == 20
    assert right.strip() == plain and right.endswith(plain)
    assert left.strip() == plain and left.startswith(plain)


def test_pointer_space_matches_width_and_sharp_is_plain():
    plain = render_pointer(spec_of("%p"), 4096)
    assert render_pointer(FormatSpec("p", " ", 12), 4096) == render_pointer(
        FormatSpec("p", "w", 12), 4096
    )
    assert render_pointer(spec_of("%#p"), 4096) == plain


def test_pointer_null_with_width():
    result = render_pointer(spec_of("%6p"), 0)
    assert len(result) == 6
    assert result.strip() == "0x0"