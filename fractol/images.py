"""RGBA pixel buffers, textures and the pixel-level helpers behind them."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import List, Union

from .errors import ErrorCode, MlxError

BPP = 4
MAX_DIMENSION = 32767

_FNV_PRIME = 0x100000001B3
_FNV_OFFSET = 0xCBF29CE484222325
_U64 = (1 << 64) - 1


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def draw_pixel(pixels: bytearray, offset: int, color: int) -> None:
    """Write a 0xRRGGBBAA color as four bytes, red first, at offset."""
    color &= 0xFFFFFFFF
    pixels[offset : offset + BPP] = color.to_bytes(BPP, "big")


def fnv_hash(data: Union[bytes, bytearray, str]) -> int:
    """64-bit FNV-1a hash of data, each byte taken as a signed char."""
    if isinstance(data, str):
        data = data.encode()
    value = _FNV_OFFSET
    for byte in data:
        signed = byte - 256 if byte >= 128 else byte
        value ^= signed & _U64
        value = (value * _FNV_PRIME) & _U64
    return value


def rgba_to_mono(color: int) -> int:
    """Grey version of an RGBA color, keeping its alpha."""
    red = int(_f32(_f32(0.299) * ((color >> 24) & 0xFF))) & 0xFF
    green = int(_f32(_f32(0.587) * ((color >> 16) & 0xFF))) & 0xFF
    blue = int(_f32(_f32(0.114) * ((color >> 8) & 0xFF))) & 0xFF
    grey = (red + green + blue) & 0xFF
    return (grey << 24) | (grey << 16) | (grey << 8) | (color & 0xFF)


def _check_dimensions(width: int, height: int) -> None:
    if not 0 < width <= MAX_DIMENSION or not 0 < height <= MAX_DIMENSION:
        raise MlxError(ErrorCode.INVDIM)


@dataclass
class Instance:
    """One placement of an image in the window."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True


@dataclass
class Texture:
    """Raw pixel data loaded from a file."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BPP

    def __post_init__(self) -> None:
        if len(self.pixels) < self.width * self.height * self.bytes_per_pixel:
            raise ValueError("pixel data is smaller than the texture dimensions")


@dataclass(eq=False)
class Image:
    """A width x height RGBA buffer that can be shown in a window."""

    width: int
    height: int
    pixels: bytearray = field(init=False, repr=False)
    instances: List[Instance] = field(init=False, default_factory=list)
    enabled: bool = field(init=False, default=True)

    def __post_init__(self) -> None:
        _check_dimensions(self.width, self.height)
        self.pixels = bytearray(self.width * self.height * BPP)

    @property
    def count(self) -> int:
        """Number of instances of this image."""
        return len(self.instances)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y) to a 0xRRGGBBAA color."""
        if not 0 <= x < self.width or not 0 <= y < self.height:
            raise IndexError(f"pixel ({x}, {y}) is out of bounds")
        draw_pixel(self.pixels, (y * self.width + x) * BPP, color)

    def resize(self, width: int, height: int) -> None:
        """Rescale the image in place with nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self.width and height == self.height:
            return
        wstep = _f32(_f32(float(self.width)) / width)
        hstep = _f32(_f32(float(self.height)) / height)
        origin = self.pixels
        resized = bytearray(width * height * BPP)
        for j in range(height):
            src_row = int(_f32(j * hstep)) * self.width
            for i in range(width):
                src = (src_row + int(_f32(i * wstep))) * BPP
                dst = (j * width + i) * BPP
                resized[dst : dst + BPP] = origin[src : src + BPP]
        self.pixels = resized
        self.width = width
        self.height = height


def texture_to_image(texture: Texture) -> Image:
    """A new image holding a copy of the texture's pixels."""
    if texture.bytes_per_pixel > BPP:
        raise ValueError(f"textures hold at most {BPP} bytes per pixel")
    image = Image(texture.width, texture.height)
    row = texture.width * texture.bytes_per_pixel
    for i in range(texture.height):
        src = i * texture.width * texture.bytes_per_pixel
        dst = i * image.width * texture.bytes_per_pixel
        image.pixels[dst : dst + row] = texture.pixels[src : src + row]
    return image