"""A small printf supporting the %c, %s, %p, %d, %i, %u, %x, %X and %% conversions.

Conversions take no flags, widths or precisions. An unknown conversion
character is consumed and produces nothing. Integers follow 32-bit C
``int`` and ``unsigned int`` rules.
"""

from __future__ import annotations

from typing import Any, Iterator

from ftkit.output import putstr_fd

STDOUT_FD = 1

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {len(value)}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    return f"0x{address & _POINTER_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    number = _as_int(value, spec)
    if spec in "di":
        return str(_int32(number))
    if spec == "u":
        return str(number & _UINT32_MASK)
    if spec == "x":
        return f"{number & _UINT32_MASK:x}"
    return f"{number & _UINT32_MASK:X}"


def format_printf(fmt: str, *args: Any) -> str:
    """The text that ``printf(fmt, *args)`` would write."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    return putstr_fd(format_printf(fmt, *args), STDOUT_FD)