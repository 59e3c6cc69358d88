"""Allocating string helpers: insertion, ASCII case conversion and trimming."""

from __future__ import annotations

from typing import Optional

_WHITESPACE = "\t\n\v\f\r "

_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_LOWER = "abcdefghijklmnopqrstuvwxyz"
_TO_UPPER = str.maketrans(_LOWER, _UPPER)
_TO_LOWER = str.maketrans(_UPPER, _LOWER)


def insert(src: Optional[str], text: Optional[str], start_index: int) -> Optional[str]:
    """Return ``src`` with ``text`` inserted at ``start_index``.

    Returns None when either string is None; raises ValueError when the
    index lies outside ``0..len(src)``.
    """
    if src is None or text is None:
        return None
    if not 0 <= start_index <= len(src):
        raise ValueError(
            f"start index {start_index} is outside 0..{len(src)}"
        )
    return src[:start_index] + text + src[start_index:]


def to_lower(text: Optional[str]) -> Optional[str]:
    """Return ``text`` with ASCII capitals turned to lower case; None stays None."""
    if text is None:
        return None
    return text.translate(_TO_LOWER)


def to_upper(text: Optional[str]) -> Optional[str]:
    """Return ``text`` with ASCII small letters turned to capitals; None stays None."""
    if text is None:
        return None
    return text.translate(_TO_UPPER)


def trim(src: Optional[str], trim_chars: Optional[str]) -> Optional[str]:
    """Strip characters of ``trim_chars`` from both ends of ``src``.

    When ``trim_chars`` is None or empty, whitespace is stripped instead.
    Returns None when ``src`` is None.
    """
    if src is None:
        return None
    chars = trim_chars if trim_chars else _WHITESPACE
    return src.strip(chars)