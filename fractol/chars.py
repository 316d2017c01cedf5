"""ASCII character classification and case conversion.

Every function takes either an integer code point or a one-character
string. Case conversion returns the same kind of value it was given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters only."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _like(c, code)


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _like(c, code)