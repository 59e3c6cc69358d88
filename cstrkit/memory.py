"""Operations on raw byte buffers: search, compare, copy and fill."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]
WritableBytes = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: BytesLike) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(
                f"byte count {n} exceeds buffer length {len(buffer)}"
            )


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None.

    Only the low eight bits of ``c`` take part in the comparison.
    """
    _check_count(n, data)
    position = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if position < 0 else position


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Returns 0 when they match, otherwise the difference between the first
    pair of bytes that differ.
    """
    _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: WritableBytes, src: BytesLike, n: int) -> WritableBytes:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: WritableBytes, src: BytesLike, n: int) -> WritableBytes:
    """Copy ``n`` bytes from ``src`` into ``dest``; the two may overlap."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memset(buffer: WritableBytes, c: int, n: int) -> WritableBytes:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``c``."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer