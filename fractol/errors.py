"""Error codes reported by the graphics layer and their descriptions."""

from __future__ import annotations

from enum import IntEnum
from typing import Union


class ErrorCode(IntEnum):
    """Every failure the graphics layer can report."""

    SUCCESS = 0
    INVEXT = 1
    INVFILE = 2
    INVPNG = 3
    INVXPM = 4
    INVPOS = 5
    INVDIM = 6
    INVIMG = 7
    VERTFAIL = 8
    FRAGFAIL = 9
    SHDRFAIL = 10
    MEMFAIL = 11
    GLADFAIL = 12
    GLFWFAIL = 13
    WINFAIL = 14
    STRTOOBIG = 15


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "No Errors",
    ErrorCode.INVEXT: "File has invalid extension",
    ErrorCode.INVFILE: "Failed to open the file",
    ErrorCode.INVPNG: "PNG file is invalid or corrupted",
    ErrorCode.INVXPM: "XPM42 file is invalid or corrupted",
    ErrorCode.INVPOS: "The specified X or Y positions are out of bounds",
    ErrorCode.INVDIM: "The specified Width or Height dimensions are out of bounds",
    ErrorCode.INVIMG: "The provided image is invalid, might indicate mismanagement of images",
    ErrorCode.VERTFAIL: "Failed to compile the vertex shader.",
    ErrorCode.FRAGFAIL: "Failed to compile the fragment shader.",
    ErrorCode.SHDRFAIL: "Failed to compile the shaders.",
    ErrorCode.MEMFAIL: "Failed to allocate memory",
    ErrorCode.GLADFAIL: "Failed to initialize GLAD",
    ErrorCode.GLFWFAIL: "Failed to initialize GLFW",
    ErrorCode.WINFAIL: "Failed to create window",
    ErrorCode.STRTOOBIG: "String is too big to be drawn",
}


def strerror(code: Union[ErrorCode, int]) -> str:
    """The English description of an error code.

    Raises ValueError for a value that is not an error code.
    """
    try:
        member = ErrorCode(code)
    except ValueError:
        raise ValueError(f"not an error code: {code!r}") from None
    return _DESCRIPTIONS[member]


class MlxError(Exception):
    """A failure in the graphics layer, carrying its ErrorCode."""

    def __init__(self, code: Union[ErrorCode, int]) -> None:
        self.code = ErrorCode(code)
        super().__init__(strerror(self.code))