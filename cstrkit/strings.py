"""Null-terminated string operations on Python text.

Every string argument is read up to its first NUL character, the way a
terminated string would be. Functions that would hand back a position in
the string return an index instead, or None when nothing is found.
"""

from __future__ import annotations

from itertools import islice
from typing import Optional, Union

_MAX_CODE_POINT = 0x10FFFF

CharLike = Union[str, int]


def _cstr(text: str) -> str:
    """Return ``text`` up to, not including, its first NUL."""
    return text.partition("\0")[0]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _compare(first: str, second: str, limit: Optional[int]) -> int:
    a = _cstr(first) + "\0"
    b = _cstr(second) + "\0"
    for ca, cb in islice(zip(a, b), limit):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == "\0":
            break
    return 0


def strlen(text: str) -> int:
    """Return the number of characters before the terminator."""
    return len(_cstr(text))


def strcat(dest: str, src: str) -> str:
    """Return ``dest`` followed by ``src``."""
    return _cstr(dest) + _cstr(src)


def strncat(dest: str, src: str, n: int) -> str:
    """Return ``dest`` followed by at most ``n`` characters of ``src``."""
    if n <= 0:
        return _cstr(dest)
    return _cstr(dest) + _cstr(src)[:n]


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    The terminator counts as part of the string, so searching for code 0
    gives the string's length. Codes outside 0..127 are never found.
    """
    code = _code(c)
    if not 0 <= code <= 127:
        return None
    position = (_cstr(text) + "\0").find(chr(code))
    return None if position < 0 else position


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    The terminator counts as part of the string.
    """
    code = _code(c)
    if not 0 <= code <= _MAX_CODE_POINT:
        return None
    position = (_cstr(text) + "\0").rfind(chr(code))
    return None if position < 0 else position


def strcmp(first: str, second: str) -> int:
    """Compare two strings; 0 when equal, else the difference of the first differing codes."""
    return _compare(first, second, None)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return _compare(first, second, n)


def strcpy(src: str) -> str:
    """Return a copy of ``src`` up to its terminator."""
    return _cstr(src)


def strncpy(src: str, n: int) -> str:
    """Return exactly ``n`` characters: a prefix of ``src``, padded with NULs.

    When ``src`` has ``n`` or more characters the result holds no terminator.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    return _cstr(src)[:n].ljust(n, "\0")


def strcspn(text: str, reject: str) -> int:
    """Return the length of the leading part of ``text`` with no character of ``reject``."""
    rejected = set(_cstr(reject))
    body = _cstr(text)
    return next((i for i, ch in enumerate(body) if ch in rejected), len(body))


def strspn(text: str, accept: str) -> int:
    """Return the length of the leading part of ``text`` made only of characters of ``accept``."""
    accepted = set(_cstr(accept))
    body = _cstr(text)
    return next((i for i, ch in enumerate(body) if ch not in accepted), len(body))


def strpbrk(text: str, accept: str) -> Optional[int]:
    """Return the index of the first character of ``text`` found in ``accept``, or None."""
    accepted = set(_cstr(accept))
    return next((i for i, ch in enumerate(_cstr(text)) if ch in accepted), None)


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Return the index where ``needle`` first occurs in ``haystack``, or None.

    An empty needle is found at index 0.
    """
    position = _cstr(haystack).find(_cstr(needle))
    return None if position < 0 else position