"""Byte-buffer operations on bytearrays and other mutable buffers."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Optional

Buffer = MutableSequence[int]


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer of {length} bytes")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_count(n, len(buf))
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memcpy(dest: Buffer, src: Sequence[int], n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data: Sequence[int], c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n, len(data))
    target = c & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, len(a), len(b))
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memmove(buf: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to ``dest``; regions may overlap."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest, len(buf) - src)
    if n and dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf