"""A headless window context that owns images, hooks and the render loop.

The context keeps everything a windowing backend would: the window size,
the images and their draw calls, the registered input hooks and the frame
loop. Input events are fed in by calling the event methods.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .images import Image, Instance
from .renderqueue import DrawCall, RenderQueue


class Setting(IntEnum):
    """Options that apply to windows created afterwards."""

    STRETCH_IMAGE = 0
    FULLSCREEN = 1
    MAXIMIZED = 2
    DECORATED = 3
    HEADLESS = 4


@dataclass
class _State:
    settings: Dict[Setting, int]
    sort_queue: bool = False


_state = _State(
    settings={
        Setting.STRETCH_IMAGE: False,
        Setting.FULLSCREEN: False,
        Setting.MAXIMIZED: False,
        Setting.DECORATED: True,
        Setting.HEADLESS: False,
    }
)


def set_setting(setting: Union[Setting, int], value: int) -> None:
    """Change a setting for windows created from now on.

    Raises ValueError for an unknown setting.
    """
    try:
        member = Setting(setting)
    except ValueError:
        raise ValueError(f"invalid setting: {setting!r}") from None
    _state.settings[member] = value


def set_instance_depth(instance: Instance, depth: int) -> None:
    """Move an instance to another depth; the queue is re-sorted next frame."""
    if instance is None:
        raise TypeError("instance must not be None")
    if instance.z == depth:
        return
    instance.z = depth
    _state.sort_queue = True


@dataclass(frozen=True)
class KeyData:
    """What a key hook receives about one key event."""

    key: int
    action: int
    scancode: int
    modifiers: int


_Hook = Tuple[Callable[..., Any], Any]


def _require_callable(func: Any) -> None:
    if func is None or not callable(func):
        raise TypeError("hook function must be callable")


def _fdiv(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


class Mlx:
    """A window with its images, input hooks and render loop."""

    def __init__(self, width: int, height: int, title: str, resize: bool = False) -> None:
        if title is None:
            raise TypeError("title must not be None")
        if width <= 0:
            raise ValueError("Window width must be positive")
        if height <= 0:
            raise ValueError("Window height must be positive")
        settings = _state.settings
        self.title = title
        self.width = width
        self.height = height
        self.initial_width = width
        self.initial_height = height
        self.resizable = bool(resize)
        self.fullscreen = bool(settings[Setting.FULLSCREEN])
        self.maximized = bool(settings[Setting.MAXIMIZED])
        self.decorated = bool(settings[Setting.DECORATED])
        self.visible = not settings[Setting.HEADLESS]
        self.delta_time = 0.0
        self.zdepth = 0
        self.images: List[Image] = []
        self.render_queue = RenderQueue()
        self.projection: List[float] = []
        self.last_frame: List[DrawCall] = []
        self.frames_rendered = 0
        self.should_close = False
        self.terminated = False
        self._loop_hooks: List[_Hook] = []
        self._key_hook: Optional[_Hook] = None
        self._mouse_hook: Optional[_Hook] = None
        self._scroll_hook: Optional[_Hook] = None
        self._cursor_hook: Optional[_Hook] = None
        self._close_hook: Optional[_Hook] = None
        self._resize_hook: Optional[_Hook] = None
        self._clock_start = time.monotonic()

    def __enter__(self) -> "Mlx":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.terminate()

    # Images

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this window.

        Raises MlxError with INVDIM for a zero or oversized dimension.
        """
        image = Image(width, height)
        self.images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of image at (x, y) and return its index."""
        if image is None:
            raise TypeError("image must not be None")
        image.instances.append(Instance(x=x, y=y, z=self.zdepth, enabled=True))
        self.zdepth += 1
        index = len(image.instances) - 1
        _state.sort_queue = True
        self.render_queue.push_front(DrawCall(image, index))
        return index

    def delete_image(self, image: Image) -> None:
        """Remove every instance of image from the window and forget it."""
        if image is None:
            raise TypeError("image must not be None")
        while self.render_queue.remove_image(image) is not None:
            pass
        for index, owned in enumerate(self.images):
            if owned is image:
                del self.images[index]
                image.instances.clear()
                break

    # Loop

    def loop_hook(self, func: Callable[[Any], Any], param: Any = None) -> bool:
        """Run func(param) once every frame, after earlier loop hooks."""
        _require_callable(func)
        self._loop_hooks.append((func, param))
        return True

    def _update_matrix(self) -> None:
        stretch = _state.settings[Setting.STRETCH_IMAGE]
        width = float(self.initial_width if stretch else self.width)
        height = float(self.initial_height if stretch else self.height)
        depth = float(self.zdepth)
        span = depth - -depth
        self.projection = [
            _fdiv(2.0, width), 0.0, 0.0, 0.0,
            0.0, _fdiv(2.0, -height), 0.0, 0.0,
            0.0, 0.0, _fdiv(-2.0, span), 0.0,
            -1.0, -_fdiv(height, -height), -_fdiv(depth + -depth, span), 1.0,
        ]

    def _run_loop_hooks(self) -> None:
        for func, param in list(self._loop_hooks):
            if self.should_close:
                break
            func(param)

    def _render_images(self) -> None:
        if _state.sort_queue:
            _state.sort_queue = False
            self.render_queue.sort()
        frame = []
        for call in self.render_queue:
            instance = call.image.instances[call.instance_id]
            if call.image.enabled and instance.enabled:
                frame.append(call)
        self.last_frame = frame

    def loop(self) -> None:
        """Run frames until the window is asked to close."""
        previous = 0.0
        while not self.should_close:
            now = time.monotonic() - self._clock_start
            self.delta_time = now - previous
            previous = now
            if self.width > 1 or self.height > 1:
                self._update_matrix()
            self._run_loop_hooks()
            self._render_images()
            self.frames_rendered += 1

    def close_window(self) -> None:
        """Ask the loop to stop after the current frame."""
        self.should_close = True

    def terminate(self) -> None:
        """Release every hook, draw call and image held by the window."""
        self._loop_hooks.clear()
        self.render_queue = RenderQueue()
        for image in self.images:
            image.instances.clear()
        self.images.clear()
        self.last_frame = []
        self.terminated = True

    # Input hooks

    def key_hook(self, func: Callable[[KeyData, Any], Any], param: Any = None) -> None:
        """Call func(key_data, param) for every key event."""
        _require_callable(func)
        self._key_hook = (func, param)

    def mouse_hook(self, func: Callable[[int, int, int, Any], Any], param: Any = None) -> None:
        """Call func(button, action, modifiers, param) for every mouse button event."""
        _require_callable(func)
        self._mouse_hook = (func, param)

    def scroll_hook(self, func: Callable[[float, float, Any], Any], param: Any = None) -> None:
        """Call func(xoffset, yoffset, param) for every scroll event."""
        _require_callable(func)
        self._scroll_hook = (func, param)

    def cursor_hook(self, func: Callable[[float, float, Any], Any], param: Any = None) -> None:
        """Call func(x, y, param) whenever the cursor moves."""
        _require_callable(func)
        self._cursor_hook = (func, param)

    def close_hook(self, func: Callable[[Any], Any], param: Any = None) -> None:
        """Call func(param) when the user asks to close the window."""
        _require_callable(func)
        self._close_hook = (func, param)

    def resize_hook(self, func: Callable[[int, int, Any], Any], param: Any = None) -> None:
        """Call func(width, height, param) when the window changes size."""
        _require_callable(func)
        self._resize_hook = (func, param)

    # Window changes and events

    def set_window_size(self, width: int, height: int) -> None:
        """Resize the window, notifying the resize hook."""
        self.width = width
        self.height = height
        if self._resize_hook is not None:
            func, param = self._resize_hook
            func(width, height, param)

    def press_key(self, key: int, action: int = 1, scancode: int = 0, modifiers: int = 0) -> None:
        """Deliver a key event to the key hook, if one is registered."""
        if self._key_hook is not None:
            func, param = self._key_hook
            func(KeyData(int(key), action, scancode, modifiers), param)

    def click_mouse(self, button: int, action: int = 1, modifiers: int = 0) -> None:
        """Deliver a mouse button event to the mouse hook, if registered."""
        if self._mouse_hook is not None:
            func, param = self._mouse_hook
            func(button, action, modifiers, param)

    def scroll(self, xoffset: float, yoffset: float) -> None:
        """Deliver a scroll event to the scroll hook, if registered."""
        if self._scroll_hook is not None:
            func, param = self._scroll_hook
            func(xoffset, yoffset, param)

    def move_cursor(self, x: float, y: float) -> None:
        """Deliver a cursor movement to the cursor hook, if registered."""
        if self._cursor_hook is not None:
            func, param = self._cursor_hook
            func(x, y, param)

    def request_close(self) -> None:
        """Deliver a close request from the user to the close hook, if registered."""
        if self._close_hook is not None:
            func, param = self._close_hook
            func(param)