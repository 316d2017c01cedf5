"""Reader for XPM42, a small text image format.

A file starts with the line ``!XPM42``, then a header line giving width,
height, colour count, characters per pixel and mode (``c`` for colour,
``m`` for monochrome). Colour lines such as ``.X #00FF00FF`` follow, and
then one line of pixel characters per image row.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import List, Optional, TextIO, Tuple, Union

from .chars import isalnum
from .errors import ErrorCode, MlxError
from .images import BPP, MAX_DIMENSION, Texture, draw_pixel, fnv_hash, rgba_to_mono

MAGIC = "!XPM42\n"
MAX_CHARS_PER_PIXEL = 10

_HEADER_LINE_LIMIT = 63
_TABLE_SIZE = 65535
_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_CHAR = re.compile(r"\s*(\S)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)([0-9a-fA-F]*)")


@dataclass
class Xpm:
    """A decoded XPM42 image."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str

    @property
    def width(self) -> int:
        return self.texture.width

    @property
    def height(self) -> int:
        return self.texture.height


def _invalid() -> MlxError:
    return MlxError(ErrorCode.INVXPM)


def _parse_int(sign: str, digits: str) -> int:
    if digits[:2] in ("0x", "0X"):
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits[0] == "0":
        value = int(digits, 8)
    else:
        value = int(digits)
    return -value if sign == "-" else value


def _scan_header(line: str) -> Tuple[List[int], str]:
    values: List[int] = []
    pos = 0
    for _ in range(4):
        match = _INT.match(line, pos)
        if match is None:
            raise _invalid()
        values.append(_parse_int(match.group(1), match.group(2)))
        pos = match.end()
    match = _CHAR.match(line, pos)
    return values, match.group(1) if match else ""


def _parse_channel(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    digits = match.group(2) if match else ""
    if not digits:
        return 0
    value = int(digits, 16)
    if match.group(1) == "-":
        value = -value
    return value & 0xFF


def _parse_entry(line: str, cpp: int, mode: str) -> Tuple[int, int]:
    if line.rfind(" ") != cpp:
        raise _invalid()
    if len(line) < cpp + 3 or line[cpp + 1] != "#" or not isalnum(line[cpp + 2]):
        raise _invalid()
    start = cpp + 2
    color = 0
    for shift, offset in zip((24, 16, 8, 0), (0, 2, 4, 6)):
        channel = line[start + offset : start + offset + 2]
        color |= _parse_channel(channel) << shift
    if mode == "m":
        color = rgba_to_mono(color)
    return fnv_hash(line[:cpp]) % _TABLE_SIZE, color


def read_xpm42(stream: TextIO) -> Xpm:
    """Decode an XPM42 image from a text stream.

    Raises MlxError with ErrorCode.INVXPM when the content is malformed.
    """
    if stream.readline(_HEADER_LINE_LIMIT) != MAGIC:
        raise _invalid()
    header = stream.readline(_HEADER_LINE_LIMIT)
    if not header:
        raise _invalid()
    (width, height, color_count, cpp), mode = _scan_header(header)
    if not 0 <= width <= MAX_DIMENSION or not 0 <= height <= MAX_DIMENSION:
        raise _invalid()
    if mode not in ("c", "m") or not 0 <= cpp <= MAX_CHARS_PER_PIXEL:
        raise _invalid()

    table = {}
    for _ in range(max(color_count, 0)):
        line = stream.readline()
        if not line:
            raise _invalid()
        slot, color = _parse_entry(line, cpp, mode)
        table[slot] = color

    pixels = bytearray(width * height * BPP)
    for y in range(height):
        line = stream.readline()
        if not line:
            raise _invalid()
        if line.endswith("\n"):
            line = line[:-1]
        if len(line) != width * cpp:
            raise _invalid()
        for x in range(width):
            key = line[x * cpp : (x + 1) * cpp]
            color = table.get(fnv_hash(key) % _TABLE_SIZE, 0)
            draw_pixel(pixels, (y * width + x) * BPP, color)

    texture = Texture(width, height, pixels, BPP)
    return Xpm(texture=texture, color_count=color_count, cpp=cpp, mode=mode)


def load_xpm42(path: Union[str, "os.PathLike[str]"]) -> Xpm:
    """Load an XPM42 image from a file whose name contains ``.xpm42``.

    Raises MlxError with INVEXT for a wrong extension, INVFILE when the
    file cannot be opened and INVXPM when its content is malformed.
    """
    name = os.fspath(path)
    if ".xpm42" not in name:
        raise MlxError(ErrorCode.INVEXT)
    try:
        handle = open(name, encoding="latin-1", newline="")
    except OSError as err:
        raise MlxError(ErrorCode.INVFILE) from err
    with handle:
        return read_xpm42(handle)