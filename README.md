# cstrkit

Classic C string and memory routines for Python, with the edge cases C
gives them. It also provides printf-style formatting and scanf-style
parsing. It has no dependencies outside the standard library.

## Installation

```
pip install cstrkit
```

## Modules

- `cstrkit.memory`: `memchr`, `memcmp`, `memcpy`, `memmove` and `memset`
  on byte buffers. `memcpy`, `memmove` and `memset` work in place on a
  `bytearray` or `memoryview`. A byte count larger than a buffer raises
  `ValueError`.
- `cstrkit.strings`: `strlen`, `strcat`, `strncat`, `strchr`, `strrchr`,
  `strcmp`, `strncmp`, `strcpy`, `strncpy`, `strcspn`, `strspn`,
  `strpbrk` and `strstr`. They work on Python `str`. Each string is read
  up to its first NUL character. Searches return an index, or `None`
  when nothing is found.
- `cstrkit.extras` holds four helpers:
  - `insert` adds text at a given index.
  - `to_lower` and `to_upper` change ASCII case.
  - `trim` strips given characters from both ends, or whitespace when the
    characters are `None` or empty.
- `cstrkit.tokenizer`: the `Tokenizer` class, with its `next_token(delim)`
  method, and the `tokenize(text, delim)` generator. Both split text on
  delimiter characters the way `strtok` does.
- `cstrkit.conversions` holds the building blocks of printf-style
  formatting:
  - `Flags` and `FormatSpec` hold one parsed conversion.
  - `parse_spec` parses a conversion specification.
  - `format_signed`, `format_unsigned`, `format_fixed_or_exp` and
    `format_general` render numbers.
  - `pad_number` widens a rendered number to its field width.
- `cstrkit.formatting`: `sprintf(fmt, *args)` returns the formatted
  string. It handles `%c %d %i %e %E %f %g %G %o %s %u %x %X %p %n %%`,
  flags, width, precision, `*` and the `h`, `l`, `ll` and `L` modifiers.
  For `%n`, pass a list and the count is appended to it.
- `cstrkit.scanning`: `sscanf(text, fmt)` returns the values read, as a
  list. `parse_scan_spec` parses one scan directive into a `ScanSpec`.
  `sscanf` raises `EOFError` when the input ends before the first
  conversion.

## Examples

```python
from cstrkit.memory import memmove
from cstrkit.strings import strspn, strncat, strchr
from cstrkit.extras import to_upper, trim, insert
from cstrkit.tokenizer import tokenize
from cstrkit.formatting import sprintf
from cstrkit.scanning import sscanf

buf = bytearray(b"hello")
memmove(buf, b"HE", 2)                   # bytearray(b'HEllo')

strspn("Hello World", "Hello")           # 5
strncat("String project", "abc", 1)      # "String projecta"
strchr("abc", "c")                       # 2

to_upper("hello 123")                    # "HELLO 123"
trim("  padded  ", None)                 # "padded"
insert("Hello!", " world", 5)            # "Hello world!"

list(tokenize("a,b;;c", ",;"))           # ["a", "b", "c"]

sprintf("<%5.2f>|<%-4d>", 3.14159, 7)    # "< 3.14>|<7   >"

sscanf("42 3.5 word", "%d %lf %s")       # [42, 3.5, "word"]
```

## What it does not do

The package does not map error numbers to message text. It has no
`strerror` and no per-platform error tables. Use `os.strerror` from the
standard library for that.

## Running the tests

```
pip install -e .[test]
pytest
```