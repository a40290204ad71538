"""Parsing of a single conversion specification in a format string."""

from __future__ import annotations

from dataclasses import dataclass

from .lengths import _char_at, read_number

FLAG_CHARS = "-0.# +"
CONVERSION_CHARS = "cspdiuxX%"
WIDTH_FLAG = "w"


@dataclass(frozen=True)
class FormatSpec:
    """A parsed conversion: up to two flags with their numbers, and the type.

    A flag of ``"w"`` means the specification began with a bare width.
    An empty string stands for a missing flag or an unknown conversion.
    """

    conversion: str = ""
    first_flag: str = ""
    first_value: int = 0
    second_flag: str = ""
    second_value: int = 0


def flag_char(char: str) -> str:
    """Return *char* if it is a flag character, else an empty string."""
    return char if len(char) == 1 and char in FLAG_CHARS else ""


def skip_flags(text: str, pos: int) -> int:
    """Skip a run of the flag character found at *pos*; return the new index."""
    flag = flag_char(_char_at(text, pos))
    if not flag:
        return pos
    while _char_at(text, pos) == flag:
        pos += 1
    return pos


def conversion_char(char: str) -> str:
    """Return *char* if it is a known conversion type, else an empty string."""
    return char if len(char) == 1 and char in CONVERSION_CHARS else ""


def parse_spec(text: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse the specification whose ``%`` sits at *pos*.

    Returns the spec and the index of its conversion character, the last
    character the specification consumes.
    """
    pos += 1
    if "1" <= _char_at(text, pos) <= "9":
        first_flag = WIDTH_FLAG
        first_value, pos = read_number(text, pos)
    else:
        first_flag = flag_char(_char_at(text, pos))
        pos = skip_flags(text, pos)
        peeked, after = read_number(text, pos)
        if peeked:
            first_value, pos = peeked, after
        else:
            first_value = 0
    second_flag = flag_char(_char_at(text, pos))
    pos = skip_flags(text, pos)
    second_value, pos = read_number(text, pos)
    spec = FormatSpec(
        conversion=conversion_char(_char_at(text, pos)),
        first_flag=first_flag,
        first_value=first_value,
        second_flag=second_flag,
        second_value=second_value,
    )
    return spec, pos