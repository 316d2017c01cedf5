"""String utilities over Python ``str`` values.

Searches return indices rather than pointers, and ``None`` where nothing is
found. A character argument may be a one-character string or an integer
code; integer codes are taken modulo 256, the way a byte is.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_WHITESPACE = frozenset("\t\n\v\f\r ")
_INT_BITS = 32


def _char_code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected int or str, got {type(c).__name__}")
    return c & 0xFF


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def _wrap_int(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s.

    Searching for the NUL character finds the end of the string.
    """
    target = _char_code(c)
    if target == 0:
        return len(s)
    return next((i for i, ch in enumerate(s) if ord(ch) == target), None)


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s.

    Searching for the NUL character finds the end of the string.
    """
    target = _char_code(c)
    if target == 0:
        return len(s)
    for i in reversed(range(len(s))):
        if ord(s[i]) == target:
            return i
    return None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders s1 and s2.

    The result is the difference of the first differing character codes,
    where the end of a string counts as code 0.
    """
    _check_non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in big, matching only within big's first length characters."""
    _check_non_negative("length", length)
    if not little:
        return 0
    found = big[:length].find(little)
    return None if found < 0 else found


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """What a buffer of size characters would hold after copying src.

    Returns the copied text (at most size - 1 characters, nothing when size
    is 0) and the full length of src, so truncation shows as a shorter copy.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting text and the length the full result would have had.
    When dest already fills the buffer it is returned unchanged, with
    size + len(src) as the length.
    """
    _check_non_negative("size", size)
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def atoi(s: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed int.

    Leading whitespace is skipped and one '+' or '-' sign is accepted.
    Parsing stops at the first non-digit; no digits gives 0.
    """
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] == "+":
        pos += 1
    elif pos < len(s) and s[pos] == "-":
        sign = -1
        pos += 1
    result = 0
    while pos < len(s) and "0" <= s[pos] <= "9":
        result = result * 10 + (ord(s[pos]) - ord("0"))
        pos += 1
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Decimal text of n, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start past the end of s gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return s1 + s2


def strtrim(s: Optional[str], charset: Optional[str]) -> str:
    """s without the characters of charset at either end.

    A missing string gives an empty string; a missing charset leaves s as is.
    """
    if s is None:
        return ""
    if charset is None:
        return s
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """The non-empty pieces of s between occurrences of sep."""
    code = _char_code(sep)
    if code == 0:
        return [s] if s else []
    return [word for word in s.split(chr(code)) if word]


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> str:
    """A new string built from func(index, char) for each character of s.

    A missing string gives an empty string; a missing func copies s.
    """
    if s is None:
        return ""
    if func is None:
        return s
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence], func: Optional[Callable[[int, object], object]]
) -> None:
    """Call func(index, element) over a mutable character sequence.

    A value returned by func replaces the element in place. Iteration stops
    at a NUL element (``"\\0"`` or ``0``). Nothing happens when either
    argument is missing.
    """
    if s is None or func is None:
        return
    for i in range(len(s)):
        current = s[i]
        if current == "\0" or current == 0:
            break
        replacement = func(i, current)
        if replacement is not None:
            s[i] = replacement