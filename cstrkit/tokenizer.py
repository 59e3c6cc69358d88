"""Split text into tokens separated by delimiter characters.

A :class:`Tokenizer` keeps its position between calls, so the set of
delimiters may change from one token to the next.

One rule is unusual. On the first call the leading token is returned only
when a delimiter follows it. Text such as ``"word"`` with delimiters
``" "`` therefore gives no tokens at all. Every later token is returned
whether or not a delimiter follows it. An empty delimiter set on the first
call makes the whole remaining text a single token.
"""

from __future__ import annotations

from typing import Iterator, Optional

from .strings import strpbrk, strspn


def _cstr(text: str) -> str:
    return text.partition("\0")[0]


class Tokenizer:
    """Stateful tokenizer over one piece of text."""

    def __init__(self, text: str) -> None:
        self._text = _cstr(text)
        self._started = False
        self._active = False
        self._pos = 0

    def next_token(self, delim: Optional[str]) -> Optional[str]:
        """Return the next token, or None when there are no more.

        ``delim`` holds the delimiter characters for this call. None gives
        no token: on the first call it ends the tokenizer, and on a later
        call it leaves the position where it was.
        """
        if not self._started:
            self._started = True
            if delim is None:
                return None
            return self._first(_cstr(delim))
        if not self._active:
            return None
        if delim is None or self._pos >= len(self._text):
            return None
        return self._following(_cstr(delim))

    def _first(self, delim: str) -> Optional[str]:
        start = strspn(self._text, delim)
        rest = self._text[start:]
        if not rest:
            return None
        if not delim:
            self._active = True
            self._pos = len(self._text)
            return rest
        end = strpbrk(rest, delim)
        if end is None:
            return None
        self._active = True
        self._pos = start + end + 1
        return rest[:end]

    def _following(self, delim: str) -> Optional[str]:
        text = self._text
        start = self._pos + strspn(text[self._pos:], delim)
        end = strpbrk(text[start:], delim)
        if end is None:
            token = text[start:]
            self._pos = len(text)
        else:
            token = text[start:start + end]
            self._pos = start + end + 1
        return token or None


def tokenize(text: str, delim: Optional[str]) -> Iterator[str]:
    """Yield the tokens of ``text`` split on the characters of ``delim``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delim)) is not None:
        yield token