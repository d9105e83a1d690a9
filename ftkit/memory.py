"""Byte-buffer operations over bytearray, bytes and memoryview objects.

Functions that write into a buffer take a mutable buffer (bytearray or a
writable memoryview) and return it. Byte counts larger than the buffers
involved raise ValueError instead of running past their ends.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buf: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Fill the first *n* bytes of *buf* with the low byte of *c*."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memcpy(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy the first *n* bytes of *src* into the start of *dest*."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy *n* bytes from *src* to *dest*; the two may overlap."""
    _check_count(n, dest, src)
    # Taking a snapshot of the source first makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *c* among the first *n*, or None."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first unequal pair, or 0."""
    _check_count(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """A zero-filled buffer of *nmemb* elements of *size* bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)