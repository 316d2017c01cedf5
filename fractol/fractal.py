"""The fractal viewer's state, key handling and command-line checking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional, Sequence, TextIO, Union

from .output import print_formatted
from .strings import strncmp

ERROR_MESSAGE = (
    'Please enter \n\t"./fractol mandelbrot" or \n\t"./fractol julia <value_1> <value_2>"\n'
)

MOVE_STEP = 0.25


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    ESCAPE = 256
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265


class UsageError(Exception):
    """The command line does not name a known fractal."""

    def __init__(self, message: str = ERROR_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class Fractal:
    """View settings for one fractal and the hooks that react to them."""

    name: str
    escape_value: float = 4.0
    iterations_definition: int = 42
    x_mov: float = 0.0
    y_mov: float = 0.0
    zoom: float = 1.0
    on_render: Optional[Callable[["Fractal"], None]] = field(default=None, repr=False)
    on_close: Optional[Callable[["Fractal"], None]] = field(default=None, repr=False)
    output: Optional[TextIO] = field(default=None, repr=False)
    closed: bool = False

    def close(self) -> None:
        """Mark the viewer closed and run the close hook."""
        self.closed = True
        if self.on_close is not None:
            self.on_close(self)

    def handle_key(self, key: Union[Key, int]) -> None:
        """React to a key: arrows pan the view, escape closes it.

        Any key other than escape has its code written out and the
        fractal rendered again.
        """
        if key == Key.ESCAPE:
            self.close()
            return
        if key == Key.LEFT:
            self.x_mov -= MOVE_STEP
        elif key == Key.RIGHT:
            self.x_mov += MOVE_STEP
        elif key == Key.UP:
            self.y_mov += MOVE_STEP
        elif key == Key.DOWN:
            self.y_mov -= MOVE_STEP
        print_formatted("%d\n", int(key), stream=self.output)
        if self.on_render is not None:
            self.on_render(self)


def parse_arguments(argv: Sequence[str]) -> Fractal:
    """The fractal named by the command-line arguments (program name excluded).

    Accepts "mandelbrot" alone, or "julia" followed by two values.
    Raises UsageError for anything else.
    """
    args = list(argv)
    if (len(args) == 1 and strncmp(args[0], "mandelbrot", 10) == 0) or (
        len(args) == 3 and strncmp(args[0], "julia", 5) == 0
    ):
        return Fractal(name=args[0])
    raise UsageError()