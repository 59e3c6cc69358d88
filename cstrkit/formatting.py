"""printf-style formatting of a whole format string."""

from __future__ import annotations

import re
from collections.abc import MutableSequence
from typing import Iterator

from .conversions import (
    CONVERSIONS,
    NULL_POINTER,
    FormatSpec,
    format_fixed_or_exp,
    format_general,
    format_signed,
    format_unsigned,
    parse_spec,
)

_CONVERSION_SET = re.escape(CONVERSIONS)
_SPEC = re.compile(f"%([^{_CONVERSION_SET}]*[{_CONVERSION_SET}])")


def _next_arg(source: Iterator[object], conversion: str) -> object:
    try:
        return next(source)
    except StopIteration:
        raise TypeError(f"missing argument for %{conversion}") from None


def _pad(text: str, spec: FormatSpec) -> str:
    if spec.flags.minus:
        return text.ljust(spec.width)
    return text.rjust(spec.width)


def _format_char(value: object, spec: FormatSpec) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        char = value
    elif isinstance(value, int) and not isinstance(value, bool):
        char = chr(value) if "l" in spec.length else chr(value & 0xFF)
    else:
        raise TypeError(f"%c needs an int or a character, got {type(value).__name__}")
    return _pad(char, spec)


def _format_string(value: object, spec: FormatSpec) -> str:
    if value is None:
        text = NULL_POINTER
    elif isinstance(value, str):
        text = value.partition("\0")[0]
    else:
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    if spec.precision is not None:
        text = text[:spec.precision]
    return _pad(text, spec)


def _render(spec: FormatSpec, source: Iterator[object]) -> str:
    conversion = spec.conversion
    if conversion == "%":
        return "%"
    value = _next_arg(source, conversion)
    if conversion in "di":
        return format_signed(value, spec)  # type: ignore[arg-type]
    if conversion in "ouxXp":
        return format_unsigned(value, spec)  # type: ignore[arg-type]
    if conversion in "feE":
        return format_fixed_or_exp(value, spec)  # type: ignore[arg-type]
    if conversion in "gG":
        return format_general(value, spec)  # type: ignore[arg-type]
    if conversion == "c":
        return _format_char(value, spec)
    return _format_string(value, spec)


def _store_count(target: object, count: int) -> None:
    if not isinstance(target, MutableSequence):
        raise TypeError(f"%n needs a mutable sequence, got {type(target).__name__}")
    target.append(count)


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` according to the printf-style string ``fmt``.

    The format is read up to its first NUL. ``%n`` takes a list and appends
    the number of characters produced so far. Extra arguments are ignored;
    missing ones raise TypeError, and a ``%`` with no conversion character
    after it raises ValueError.
    """
    fmt = fmt.partition("\0")[0]
    source = iter(args)
    pieces: list[str] = []
    written = 0
    pos = 0
    while (start := fmt.find("%", pos)) >= 0:
        literal = fmt[pos:start]
        pieces.append(literal)
        written += len(literal)
        match = _SPEC.match(fmt, start)
        if match is None:
            raise ValueError(f"unterminated conversion specification {fmt[start:]!r}")
        spec = parse_spec(match.group(1), source)
        pos = match.end()
        if spec.conversion == "n":
            _store_count(_next_arg(source, "n"), written)
            continue
        text = _render(spec, source)
        pieces.append(text)
        written += len(text)
    pieces.append(fmt[pos:])
    return "".join(pieces)