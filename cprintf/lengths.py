"""Printed-length helpers and small scanning utilities for format strings."""

from __future__ import annotations

NULL_TEXT_LENGTH = 6


def _char_at(text: str, pos: int) -> str:
    """Return the character at *pos*, or an empty string past the end."""
    return text[pos] if 0 <= pos < len(text) else ""


def digit_len(value: int) -> int:
    """Number of characters a decimal integer takes, counting a minus sign."""
    if value == 0:
        return 1
    count = 0
    if value < 0:
        value = -value
        count += 1
    while value > 0:
        value //= 10
        count += 1
    return count


def hex_len(value: int) -> int:
    """Number of hexadecimal digits needed for a non-negative integer."""
    if value == 0:
        return 1
    count = 0
    while value > 0:
        value //= 16
        count += 1
    return count


def ptr_len(value: int) -> int:
    """Printed length of a pointer: ``0x`` prefix plus its hex digits."""
    if value == 0:
        return 3
    return hex_len(value) + 2


def str_len(text: str | None) -> int:
    """Length of *text*; a missing string counts as ``(null)``."""
    if text is None:
        return NULL_TEXT_LENGTH
    return len(text)


def is_digit(char: str) -> bool:
    """True when *char* is a single ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def read_number(text: str, pos: int) -> tuple[int, int]:
    """Read an unsigned decimal number starting at *pos*.

    Returns the number (0 when no digit is present) and the index of the
    first character after it.
    """
    value = 0
    while is_digit(_char_at(text, pos)):
        value = value * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return value, pos