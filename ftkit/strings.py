"""String utilities with C-library semantics expressed on Python ``str``.

Searches return an index or ``None``. The bounded copy functions return a
``Bounded`` pair holding the resulting text and the length the operation
tried to create. Integer conversion follows 32-bit signed ``int`` rules.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Union

CharLike = Union[str, int]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


class Bounded(NamedTuple):
    """Result of a size-bounded copy: the text produced and the intended length."""

    text: str
    length: int


def _to_char(c: CharLike) -> str:
    """Normalise *c* to a single character; integers keep only their low byte."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an integer, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(
        f"expected a one-character string or an integer, got {type(c).__name__}"
    )


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def strlen(s: Optional[str]) -> int:
    """Length of *s*; ``None`` counts as empty."""
    return len(s) if s else 0


def strlcpy(dst: str, src: str, size: int) -> Bounded:
    """Copy at most ``size - 1`` characters of *src*.

    With a size of zero nothing is copied and *dst* is kept. The length
    reported is always that of *src*.
    """
    _check_size("size", size)
    if size == 0:
        return Bounded(dst, len(src))
    return Bounded(src[: size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> Bounded:
    """Append *src* to *dst* so the result holds at most ``size - 1`` characters.

    If *dst* already fills *size*, it is kept unchanged and the length
    reported is ``size + len(src)``; otherwise it is ``len(dst) + len(src)``.
    """
    _check_size("size", size)
    if len(dst) >= size:
        return Bounded(dst, size + len(src))
    room = size - 1 - len(dst)
    return Bounded(dst + src[:room], len(dst) + len(src))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first *c* in *s*, or ``None``; a NUL matches the end."""
    ch = _to_char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last *c* in *s*, or ``None``; a NUL matches the end."""
    ch = _to_char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return -1, 0 or 1."""
    _check_size("n", n)
    a, b = s1[:n], s2[:n]
    return (a > b) - (a < b)


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of *little* within the first *length* characters of *big*, or ``None``.

    An empty *little* is found at index 0.
    """
    _check_size("length", length)
    if not little:
        return 0
    if length == 0:
        return None
    index = big.find(little, 0, length)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; no digits gives 0. The result
    wraps around like a 32-bit signed ``int``.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(sign * value)


def strdup(s: str) -> str:
    """A copy of *s*."""
    return str(s)


def strndup(s: str, length: int) -> str:
    """The first *length* characters of *s* at most."""
    _check_size("length", length)
    return s[:length]


def substr(s: str, start: int, length: int) -> str:
    """Up to *length* characters of *s* from *start*; empty if *start* is past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """*s1* followed by *s2*."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """*s* with every leading and trailing character that is in *charset* removed."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """The non-empty pieces of *s* between occurrences of the character *sep*."""
    ch = _to_char(sep)
    return [word for word in s.split(ch) if word]


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: str, f: Callable[[int, str], Optional[str]]) -> str:
    """Call ``f(index, char)`` for each character of *s*.

    Where *f* returns a string, it replaces the character; where it returns
    ``None``, the character is kept. The resulting string is returned.
    """
    pieces = []
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)