"""Single printf-style fields: parsing a conversion specification and rendering numbers."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

CONVERSIONS = "cdieEfgGosuxXpn%"
NULL_POINTER = "(nil)"

_FLAG_CHARS = "-+ #0"
_LENGTH_CHARS = "hlL"
_DIGITS = "0123456789"
_INTEGER_CONVERSIONS = frozenset("diouxXp")
_UNSIGNED_STYLES = {"o": "o", "u": "d", "x": "x", "X": "X"}


@dataclass
class Flags:
    """The flag characters of a conversion specification."""

    minus: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    zero: bool = False


@dataclass
class FormatSpec:
    """One parsed conversion specification.

    ``precision`` is None when the specification gives none; ``length`` holds
    the length modifier characters, such as ``"h"``, ``"l"``, ``"ll"`` or ``"L"``.
    """

    conversion: str
    flags: Flags = field(default_factory=Flags)
    width: int = 0
    precision: Optional[int] = None
    length: str = ""


def _read_number(text: str, pos: int) -> Tuple[int, int]:
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    return (int(text[start:pos]) if pos > start else 0), pos


def _take_int(source: Iterator[object], what: str) -> int:
    try:
        value = next(source)
    except StopIteration:
        raise TypeError(f"missing argument for '*' {what}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"'*' {what} needs an int, got {type(value).__name__}")
    return value


def parse_spec(spec_text: str, args: Iterable[object]) -> FormatSpec:
    """Parse the text after ``%`` up to and including the conversion character.

    A ``*`` width or precision takes the next value from ``args``; pass an
    iterator to have the values consumed across calls. A negative ``*`` width
    turns on left justification, a negative ``*`` precision counts as none.
    """
    source = iter(args)
    end = len(spec_text)
    pos = 0
    while pos < end and spec_text[pos] in _FLAG_CHARS:
        pos += 1
    present = set(spec_text[:pos])
    flags = Flags(
        minus="-" in present,
        plus="+" in present,
        space=" " in present,
        alternate="#" in present,
        zero="0" in present,
    )

    if pos < end and spec_text[pos] == "*":
        width = _take_int(source, "width")
        pos += 1
        if width < 0:
            flags.minus = True
            width = -width
    else:
        width, pos = _read_number(spec_text, pos)

    precision: Optional[int] = None
    if pos < end and spec_text[pos] == ".":
        pos += 1
        if pos < end and spec_text[pos] == "*":
            value = _take_int(source, "precision")
            pos += 1
            precision = value if value >= 0 else None
        else:
            precision, pos = _read_number(spec_text, pos)

    length_start = pos
    while pos < end and spec_text[pos] in _LENGTH_CHARS:
        pos += 1
    length = spec_text[length_start:pos]

    if pos != end - 1 or spec_text[pos] not in CONVERSIONS:
        raise ValueError(f"invalid conversion specification {spec_text!r}")
    return FormatSpec(
        conversion=spec_text[pos],
        flags=flags,
        width=width,
        precision=precision,
        length=length,
    )


def _int_bits(spec: FormatSpec) -> int:
    if not spec.length:
        return 32
    return 16 if spec.length[-1] == "h" else 64


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"integer conversion needs an int, got {type(value).__name__}")
    return value


def _digits(magnitude: int, style: str, spec: FormatSpec) -> str:
    precision = 1 if spec.precision is None else spec.precision
    if magnitude == 0 and precision == 0:
        return ""
    return format(magnitude, style).zfill(precision)


def _sign(negative: bool, flags: Flags) -> str:
    if negative:
        return "-"
    if flags.plus:
        return "+"
    if flags.space:
        return " "
    return ""


def _prefix_length(text: str) -> int:
    head = 1 if text[:1] in ("+", "-", " ") else 0
    if text[head:head + 2] in ("0x", "0X"):
        head += 2
    return head


def _pad_text(text: str, spec: FormatSpec) -> str:
    if spec.flags.minus:
        return text.ljust(spec.width)
    return text.rjust(spec.width)


def pad_number(text: str, spec: FormatSpec) -> str:
    """Widen a rendered number to the field width of ``spec``.

    Left justification pads with spaces on the right. The zero flag puts
    zeros after any sign and ``0x`` prefix, except for integer conversions
    that give a precision. Otherwise spaces go on the left.
    """
    width = spec.width
    if len(text) >= width:
        return text
    if spec.flags.minus:
        return text.ljust(width)
    zero_fill = spec.flags.zero and not (
        spec.conversion in _INTEGER_CONVERSIONS and spec.precision is not None
    )
    if zero_fill:
        head = _prefix_length(text)
        return text[:head] + text[head:].rjust(width - head, "0")
    return text.rjust(width)


def format_signed(value: int, spec: FormatSpec) -> str:
    """Render ``value`` for a ``d`` or ``i`` conversion.

    The value is first cut to the size its length modifier names: 16 bits
    for ``h``, 64 for ``l``, ``ll`` or ``L``, 32 otherwise.
    """
    if spec.conversion not in ("d", "i"):
        raise ValueError(f"conversion {spec.conversion!r} is not a signed integer")
    number = _wrap(_require_int(value), _int_bits(spec), signed=True)
    text = _sign(number < 0, spec.flags) + _digits(abs(number), "d", spec)
    return pad_number(text, spec)


def format_unsigned(value: Optional[int], spec: FormatSpec) -> str:
    """Render ``value`` for an ``o``, ``u``, ``x``, ``X`` or ``p`` conversion.

    A pointer of None or 0 renders as ``(nil)``; other pointers render as
    ``0x`` followed by lower-case hexadecimal digits.
    """
    conversion = spec.conversion
    if conversion == "p":
        if value is None or _require_int(value) == 0:
            return _pad_text(NULL_POINTER, spec)
        number = _wrap(value, 64, signed=False)
        text = _sign(False, spec.flags) + "0x" + _digits(number, "x", spec)
        return pad_number(text, spec)
    if conversion not in _UNSIGNED_STYLES:
        raise ValueError(f"conversion {conversion!r} is not an unsigned integer")
    if value is None:
        raise TypeError("integer conversion needs an int, got NoneType")
    number = _wrap(_require_int(value), _int_bits(spec), signed=False)
    text = _digits(number, _UNSIGNED_STYLES[conversion], spec)
    if spec.flags.alternate:
        if conversion == "o" and not text.startswith("0"):
            text = "0" + text
        elif conversion in ("x", "X") and number != 0:
            text = "0" + conversion + text
    return pad_number(text, spec)


def _require_real(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"floating conversion needs a number, got {type(value).__name__}")
    return float(value)


def _format_special(number: float, spec: FormatSpec) -> str:
    word = "nan" if math.isnan(number) else "inf"
    if spec.conversion.isupper():
        word = word.upper()
    negative = math.copysign(1.0, number) < 0
    return _pad_text(_sign(negative, spec.flags) + word, spec)


def _format_float(value: object, spec: FormatSpec) -> str:
    number = _require_real(value)
    if not math.isfinite(number):
        return _format_special(number, spec)
    precision = 6 if spec.precision is None else spec.precision
    alternate = "#" if spec.flags.alternate else ""
    body = format(abs(number), f"{alternate}.{precision}{spec.conversion}")
    negative = math.copysign(1.0, number) < 0
    return pad_number(_sign(negative, spec.flags) + body, spec)


def format_fixed_or_exp(value: float, spec: FormatSpec) -> str:
    """Render ``value`` for an ``f``, ``e`` or ``E`` conversion; precision defaults to 6."""
    if spec.conversion not in ("f", "e", "E"):
        raise ValueError(f"conversion {spec.conversion!r} is not fixed or exponent")
    return _format_float(value, spec)


def format_general(value: float, spec: FormatSpec) -> str:
    """Render ``value`` for a ``g`` or ``G`` conversion.

    Fixed notation is used when the exponent lies in ``-4..precision-1``,
    exponent notation otherwise; trailing zeros go unless ``#`` is given.
    """
    if spec.conversion not in ("g", "G"):
        raise ValueError(f"conversion {spec.conversion!r} is not general")
    return _format_float(value, spec)