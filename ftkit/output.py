"""Writing characters, strings and integers straight to file descriptors.

Every function writes with ``os.write`` and returns the number of bytes
written. Text is encoded as UTF-8.
"""

from __future__ import annotations

import os
from typing import Optional

from ftkit.strings import itoa

ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> int:
    """Write all of *data* to *fd*, retrying after partial writes."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def putchar_fd(c: str, fd: int) -> int:
    """Write the single character *c* to *fd*."""
    if not isinstance(c, str):
        raise TypeError(f"expected a one-character string, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {len(c)} characters")
    return _write_all(fd, c.encode(ENCODING))


def putstr_fd(s: Optional[str], fd: int) -> int:
    """Write *s* to *fd*; ``None`` writes nothing."""
    if not s:
        return 0
    return _write_all(fd, s.encode(ENCODING))


def putendl_fd(s: Optional[str], fd: int) -> int:
    """Write *s* followed by a newline to *fd*."""
    return putstr_fd(s, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal text of the 32-bit signed integer *n* to *fd*."""
    return putstr_fd(itoa(n), fd)