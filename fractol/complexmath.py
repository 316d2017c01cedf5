"""Scaling and complex-number helpers used to render fractals."""

from __future__ import annotations

WIDTH = 800
HEIGHT = 800

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF


def map_range(
    value: float, new_min: float, new_max: float, old_min: float, old_max: float
) -> float:
    """Linearly rescale value from [old_min, old_max] to [new_min, new_max]."""
    return (new_max - new_min) * (value - old_min) / (old_max - old_min) + new_min


def sum_complex(z1: complex, z2: complex) -> complex:
    """Component-wise sum of two complex numbers."""
    return complex(z1.real + z2.real, z1.imag + z2.imag)


def square_complex(z: complex) -> complex:
    """The square of z: (x*x - y*y) + (2*x*y)i."""
    x, y = z.real, z.imag
    return complex(x * x - y * y, 2 * x * y)