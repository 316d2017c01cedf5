"""Writing characters, strings and numbers, and a small printf."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

_INT_MASK = (1 << 32) - 1
_LONG_MASK = (1 << 64) - 1


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _as_char(c: Union[int, str]) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _signed_int(value: int) -> int:
    value &= _INT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    _target(stream).write(_as_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(n))


def _convert(flag: str, args: Iterator[Any]) -> str:
    def next_arg() -> Any:
        try:
            return next(args)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{flag}") from None

    if flag == "c":
        return _as_char(next_arg())
    if flag == "s":
        value = next_arg()
        return "(null)" if value is None else str(value)
    if flag in ("d", "i"):
        return str(_signed_int(next_arg()))
    if flag == "%":
        return "%"
    if flag == "x":
        return format(next_arg() & _INT_MASK, "x")
    if flag == "X":
        return format(next_arg() & _INT_MASK, "X")
    if flag == "u":
        return str(next_arg() & _INT_MASK)
    if flag == "p":
        pointer = next_arg() & _LONG_MASK
        return "(nil)" if pointer == 0 else "0x" + format(pointer, "x")
    return ""


def format_string(fmt: str, *args: Any) -> str:
    """Expand %c %s %d %i %u %x %X %p and %% in fmt.

    An unknown conversion produces nothing, and a lone '%' at the end
    is dropped. Too few arguments raise TypeError.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        flag = next(chars, None)
        if flag is None:
            break
        pieces.append(_convert(flag, remaining))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the expansion of fmt and return how many characters were written."""
    text = format_string(fmt, *args)
    _target(stream).write(text)
    return len(text)