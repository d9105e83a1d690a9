"""Reading a file descriptor one line at a time.

A ``LineReader`` keeps, for each descriptor, the bytes read past the end
of the last line it returned, so lines from several descriptors can be
read in any interleaving.
"""

from __future__ import annotations

import os
from typing import Optional

BUFFER_SIZE = 1000
FD_MAX = 1024


class LineReader:
    """Returns successive lines from file descriptors, reading in fixed-size chunks."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: dict[int, bytes] = {}

    def read_line(self, fd: int) -> Optional[bytes]:
        """The next line of *fd*, newline included, or ``None`` at end of input.

        The last line of the input comes back without a newline if it has
        none. A failed read raises OSError and drops what was buffered.
        """
        if not 0 <= fd < FD_MAX:
            raise ValueError(f"file descriptor must be in [0, {FD_MAX}), got {fd}")
        buf = bytearray(self._pending.pop(fd, b""))
        newline = buf.find(b"\n")
        while newline < 0:
            data = os.read(fd, self.buffer_size)
            if not data:
                break
            found = data.find(b"\n")
            if found >= 0:
                newline = len(buf) + found
            buf += data
        if newline < 0:
            return bytes(buf) if buf else None
        rest = bytes(buf[newline + 1 :])
        if rest:
            self._pending[fd] = rest
        return bytes(buf[: newline + 1])


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """The next line of *fd* from a shared reader with the default buffer size."""
    return _default_reader.read_line(fd)