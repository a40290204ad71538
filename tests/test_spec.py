import pytest

from cprintf.spec import FormatSpec, conversion_char, flag_char, parse_spec, skip_flags


@pytest.mark.parametrize("char", list("-0.# +"))
def test_flag_char_recognises_flags(char):
    assert flag_char(char) == char


@pytest.mark.parametrize("char", ["a", "1", "%", "", "w", "d"])
def test_flag_char_rejects_others(char):
    assert flag_char(char) == ""


@pytest.mark.parametrize("char", list("cspdiuxX%"))
def test_conversion_char_recognises_types(char):
    assert conversion_char(char) == char


@pytest.mark.parametrize("char", ["f", "o", "-", "", "D"])
def test_conversion_char_rejects_others(char):
    assert conversion_char(char) == ""


def test_skip_flags_skips_run():
    text = "---5d"
    assert skip_flags(text, 0) == text.index("5")


def test_skip_flags_only_same_flag():
    text = "-+5"
    assert skip_flags(text, 0) == text.index("+")


def test_skip_flags_non_flag_stays():
    assert skip_flags("5d", 0) == 0
    assert skip_flags("", 0) == 0


def test_parse_plain_conversion():
    text = "%d"
    spec, pos = parse_spec(text, 0)
    assert spec == FormatSpec(conversion="d")
    assert pos == text.index("d")


def test_parse_bare_width():
    text = "%5d"
    spec, pos = parse_spec(text, 0)
    assert spec == FormatSpec(conversion="d", first_flag="w", first_value=5)
    assert pos == text.index("d")


def test_parse_width_with_precision():
    text = "%12.4x"
    spec, pos = parse_spec(text, 0)
    assert spec == FormatSpec(
        conversion="x", first_flag="w", first_value=12, second_flag=".", second_value=4
    )
    assert text[pos] == "x"


def test_parse_minus_width_precision():
    text = "%-10.3s"
    spec, pos = parse_spec(text, 0)
    assert spec == FormatSpec(
        conversion="s", first_flag="-", first_value=10, second_flag=".", second_value=3
    )
    assert text[pos] == "s"


def test_parse_zero_pad():
    text = "%05d"
    spec, _ = parse_spec(text, 0)
    assert spec == FormatSpec(conversion="d", first_flag="0", first_value=5)


def test_parse_dot_zero_becomes_second_flag():
    text = "%.0d"
    spec, pos = parse_spec(text, 0)
    assert spec == FormatSpec(conversion="d", first_flag=".", second_flag="0")
    assert text[pos] == "d"


def test_parse_repeated_flags_collapse():
    text = "%---7u"
    spec, pos = parse_spec(text, 0)
    assert spec == FormatSpec(conversion="u", first_flag="-", first_value=7)
    assert text[pos] == "u"


def test_parse_percent():
    text = "%%"
    spec, pos = parse_spec(text, 0)
    assert spec == FormatSpec(conversion="%")
    assert pos == len(text) - 1


def test_parse_unknown_conversion():
    text = "%q"
    spec, pos = parse_spec(text, 0)
    assert spec.conversion == ""
    assert text[pos] == "q"


def test_parse_at_end_of_text():
    text = "abc%"
    spec, pos = parse_spec(text, text.index("%"))
    assert spec == FormatSpec()
    assert pos == len(text)


def test_parse_from_offset():
    text = "x=%+8d!"
    spec, pos = parse_spec(text, text.index("%"))
    assert spec == FormatSpec(conversion="d", first_flag="+", first_value=8)
    assert text[pos + 1] == "!"