"""scanf-style reading of values out of a string."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .conversions import CONVERSIONS

_WHITESPACE = "\t\n\v\f\r "
_LENGTH_CHARS = "hlL"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"
_DIGITS_FOR_BASE = {8: "01234567", 10: _DIGITS, 16: _HEX_DIGITS}
_BASES = {"d": 10, "u": 10, "i": 0, "o": 8, "x": 16, "X": 16, "p": 16}
_SIGNED_CONVERSIONS = frozenset("din")
_FLOAT_CONVERSIONS = frozenset("eEfgG")
_INT_BITS = {"": 32, "h": 16, "hh": 8, "l": 64, "ll": 64, "L": 32, "LL": 64}
_INT64_MAX = (1 << 63) - 1
_FLOAT = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class _InputFailure(Exception):
    """The input ran out before a conversion could start."""


class _MatchFailure(Exception):
    """The input does not fit the directive."""


@dataclass(frozen=True)
class ScanSpec:
    """One parsed scan directive.

    ``width`` is None when the directive gives none; a width of 0 counts
    as 1. ``length`` holds the length modifier, such as ``"h"``, ``"hh"``,
    ``"l"``, ``"ll"`` or ``"L"``.
    """

    conversion: str
    suppress: bool = False
    width: Optional[int] = None
    length: str = ""


def parse_scan_spec(spec_text: str) -> ScanSpec:
    """Parse the text after ``%`` up to and including the conversion character.

    ``*``, a width and a length modifier may come before the conversion.
    Raises ValueError for anything else, or for a modifier such as ``"lh"``
    or ``"lll"``.
    """
    if not spec_text or spec_text[-1] not in CONVERSIONS:
        raise ValueError(f"invalid scan specification {spec_text!r}")
    suppress = False
    width: Optional[int] = None
    length = ""
    end = len(spec_text) - 1
    pos = 0
    while pos < end:
        ch = spec_text[pos]
        if ch == "*":
            suppress = True
            pos += 1
        elif ch in _DIGITS:
            start = pos
            while pos < end and spec_text[pos] in _DIGITS:
                pos += 1
            width = max(int(spec_text[start:pos]), 1)
        elif ch in _LENGTH_CHARS:
            if not length:
                length = ch
            elif length == ch:
                length = ch * 2
            else:
                raise ValueError(f"invalid length modifier in {spec_text!r}")
            pos += 1
        else:
            raise ValueError(f"invalid scan specification {spec_text!r}")
    return ScanSpec(
        conversion=spec_text[end], suppress=suppress, width=width, length=length
    )


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _shrink(remaining: Optional[int], used: int) -> Optional[int]:
    if remaining is None:
        return None
    remaining -= used
    if remaining <= 0:
        raise _MatchFailure
    return remaining


def _field(text: str, pos: int, remaining: Optional[int]) -> str:
    return text[pos:] if remaining is None else text[pos:pos + remaining]


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _store_int(number: int, spec: ScanSpec) -> int:
    if spec.conversion == "p":
        return _wrap(number, 64, signed=False)
    signed = spec.conversion in _SIGNED_CONVERSIONS
    return _wrap(number, _INT_BITS[spec.length], signed)


def _store_float(number: float, spec: ScanSpec) -> float:
    if spec.length[:1] in ("l", "L"):
        return number
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def _parse_integer(field: str, base: int) -> Optional[Tuple[int, int]]:
    pos = 0
    if (
        base in (0, 16)
        and field[:2] in ("0x", "0X")
        and field[2:3] != ""
        and field[2] in _HEX_DIGITS
    ):
        base = 16
        pos = 2
    elif base == 0:
        base = 8 if field.startswith("0") else 10
    digits = _DIGITS_FOR_BASE[base]
    start = pos
    while pos < len(field) and field[pos] in digits:
        pos += 1
    if pos == start:
        return None
    return int(field[start:pos], base), pos


def _scan_integer(spec: ScanSpec, text: str, pos: int) -> Tuple[int, int]:
    remaining = spec.width
    if spec.conversion == "p" and text.startswith("0x", pos):
        pos += 2
        remaining = _shrink(remaining, 2)
    negative = False
    if text[pos:pos + 1] in ("+", "-"):
        negative = text[pos] == "-"
        pos += 1
        remaining = _shrink(remaining, 1)
    parsed = _parse_integer(_field(text, pos, remaining), _BASES[spec.conversion])
    if parsed is None:
        raise _MatchFailure
    magnitude, used = parsed
    if negative:
        number = -(1 << 63) if magnitude > _INT64_MAX else -magnitude
    else:
        number = min(magnitude, _INT64_MAX)
    return _store_int(number, spec), pos + used


def _scan_float(spec: ScanSpec, text: str, pos: int) -> Tuple[float, int]:
    signed = text[pos:pos + 1] in ("+", "-")
    negative = signed and text[pos] == "-"
    sign = -1.0 if negative else 1.0
    word = text[pos + signed:pos + signed + 3].lower()
    if word in ("nan", "inf"):
        special = math.nan if word == "nan" else math.inf
        return _store_float(math.copysign(special, sign), spec), pos + signed + 3
    remaining = spec.width
    if signed:
        pos += 1
        remaining = _shrink(remaining, 1)
    match = _FLOAT.match(_field(text, pos, remaining))
    if match is None:
        raise _MatchFailure
    number = float(match.group())
    return _store_float(-number if negative else number, spec), pos + match.end()


def _scan_string(spec: ScanSpec, text: str, pos: int) -> Tuple[str, int]:
    limit = len(text) if spec.width is None else min(len(text), pos + spec.width)
    end = pos
    while end < limit and text[end] not in _WHITESPACE:
        end += 1
    return text[pos:end], end


def _convert(spec: ScanSpec, text: str, pos: int) -> Tuple[object, int]:
    start = pos
    conversion = spec.conversion
    if conversion != "c":
        pos = _skip_whitespace(text, pos)
    if pos >= len(text) and conversion not in ("n", "%"):
        raise _InputFailure
    if conversion == "n":
        return _store_int(start, spec), pos
    if conversion == "%":
        if text[pos:pos + 1] == "%":
            return None, pos + 1
        raise _MatchFailure
    if conversion == "c":
        chunk = text[pos:pos + (spec.width or 1)]
        return chunk, pos + len(chunk)
    if conversion == "s":
        return _scan_string(spec, text, pos)
    if conversion in _FLOAT_CONVERSIONS:
        return _scan_float(spec, text, pos)
    return _scan_integer(spec, text, pos)


def _find_conversion(fmt: str, start: int) -> int:
    for index in range(start, len(fmt)):
        if fmt[index] in CONVERSIONS:
            return index
    raise ValueError(f"unterminated scan specification {fmt[start - 1:]!r}")


def sscanf(text: str, fmt: str) -> List[object]:
    """Read values out of ``text`` as directed by the scanf-style ``fmt``.

    Returns the assigned values in order: ints for integer conversions and
    ``%n``, floats for floating ones, strings for ``%c`` and ``%s``.
    Floating values without an ``l`` or ``L`` modifier are rounded to single
    precision; integers are cut to the size their modifier names. Scanning
    stops at the first directive the input does not fit. Raises EOFError
    when the input ends before any value but ``%n`` is assigned, and
    ValueError for a malformed directive.
    """
    text = text.partition("\0")[0]
    fmt = fmt.partition("\0")[0]
    values: List[object] = []
    assigned = 0
    pos = 0
    index = 0
    while index < len(fmt):
        ch = fmt[index]
        if ch == "%":
            end = _find_conversion(fmt, index + 1)
            spec = parse_scan_spec(fmt[index + 1:end + 1])
            index = end + 1
            try:
                value, pos = _convert(spec, text, pos)
            except _InputFailure:
                if assigned == 0:
                    raise EOFError("input ended before the first conversion") from None
                break
            except _MatchFailure:
                break
            if spec.conversion == "%" or spec.suppress:
                continue
            values.append(value)
            if spec.conversion != "n":
                assigned += 1
        elif ch in _WHITESPACE:
            pos = _skip_whitespace(text, pos)
            index += 1
        elif pos < len(text) and text[pos] == ch:
            pos += 1
            index += 1
        else:
            break
    return values