"""Byte-buffer operations on bytearrays, memoryviews and bytes."""

from __future__ import annotations

from typing import Optional

_SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"length {n} exceeds buffer of size {len(buffer)}")


def memset(buffer, value: int, n: int):
    """Fill the first n bytes of buffer with value (taken modulo 256)."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def memcpy(dest, src, n: int):
    """Copy n bytes from src into the start of dest and return dest."""
    if dest is None and src is None:
        return None
    _check_length(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src to dest, correct even when the two overlap."""
    if dest is src:
        return dest
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memchr(data, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_length(n, data)
    target = value & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(a, b, n: int) -> int:
    """Difference of the first differing bytes among the first n, or 0."""
    _check_length(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of count * size bytes.

    Raises MemoryError when the total would overflow a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if _SIZE_MAX // size < count:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)