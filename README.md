# cprintf

A small printf-style formatter. It handles a fixed set of conversions and
flags, and the same input always gives the same output.

## Conversions

| Conversion | Argument                       | Output                                   |
|------------|--------------------------------|------------------------------------------|
| `%c`       | a one-character string or int  | the character (an int is taken modulo 256) |
| `%s`       | a string or `None`             | the text, or `(null)` for `None`         |
| `%p`       | an integer address or `None`   | `0x` then lower-case hex; `0x0` for zero |
| `%d`, `%i` | an integer                     | decimal, wrapped to a signed 32-bit value |
| `%u`       | an integer                     | decimal, wrapped to an unsigned 32-bit value |
| `%x`, `%X` | an integer                     | lower- or upper-case hex, wrapped to unsigned 32 bits |
| `%%`       | none                           | a literal `%`                            |

A directive can have up to two flags, each taken from `-`, `0`, `.`, `#`,
space and `+`; a repeated flag character counts once. A number may follow
each flag. A directive that starts with a digit from `1` to `9` reads that
number as a field width.

A directive whose conversion character is not in the table produces no
text and takes no argument. If the arguments run out, `render` raises
`TypeError`.

## Usage

```python
from cprintf.printf import render, printf

render("[%5d]", 42)        # '[   42]'
render("[%-5s]", "ab")     # '[ab   ]'
render("[%.3d]", 7)        # '[007]'
render("%#x", 255)         # '0xff'
render("%p", 0)            # '0x0'
render("%s", None)         # '(null)'

count = printf("%s=%d\n", "answer", 42)   # writes to stdout, returns 10
```

`render` returns the formatted string; a format of `None` gives `""`.
`printf` writes that string to standard output and returns its length.

Each flag combination has its own padding rule. Combinations that no rule
covers fall back to the plain conversion with no padding.

## Lower-level helpers

- `cprintf.spec.parse_spec(text, pos)` reads the directive whose `%` is at
  `pos` and returns a `FormatSpec` with the index of its last character.
- `cprintf.basic` formats numbers, pointers and strings with no padding.
- `cprintf.lengths` gives printed lengths (`digit_len`, `hex_len`,
  `ptr_len`, `str_len`) and reads numbers out of a format string.
- `cprintf.text`, `cprintf.decimal` and `cprintf.hexadecimal` apply a
  `FormatSpec` to a single value (`render_char`, `render_string`,
  `render_percent`, `render_pointer`, `render_signed`, `render_unsigned`,
  `render_hex`); `cprintf.decimal_padding` holds the two-flag decimal rules.

## What it does not do

There are no floating-point conversions, no length modifiers (`l`, `h` and
the like), no `*` widths, and no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```