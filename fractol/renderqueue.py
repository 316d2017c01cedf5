"""The ordered list of image instances waiting to be drawn."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from .images import Image


@dataclass
class DrawCall:
    """A request to draw one instance of an image."""

    image: Image
    instance_id: int

    @property
    def z(self) -> int:
        """Depth of the instance this call draws."""
        return self.image.instances[self.instance_id].z


class RenderQueue:
    """Draw calls in the order they will be rendered."""

    def __init__(self, calls: Optional[Iterable[DrawCall]] = None) -> None:
        self._calls: List[DrawCall] = list(calls or ())

    def push_front(self, call: DrawCall) -> None:
        """Put a draw call at the front of the queue."""
        self._calls.insert(0, call)

    def remove_image(self, image: Image) -> Optional[DrawCall]:
        """Remove and return the first draw call for image, or None."""
        for index, call in enumerate(self._calls):
            if call.image is image:
                return self._calls.pop(index)
        return None

    def sort(self) -> None:
        """Order calls by ascending depth.

        Calls of equal depth end up in the reverse of their previous order.
        """
        self._calls = sorted(reversed(self._calls), key=lambda call: call.z)

    def __iter__(self) -> Iterator[DrawCall]:
        return iter(list(self._calls))

    def __len__(self) -> int:
        return len(self._calls)