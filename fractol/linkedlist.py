"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that owns its nodes."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Put content at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put content at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each value to delete first when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], None]]) -> None:
        """Call func on every value in order; nothing happens without func."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """A new list of func applied to every value.

        If func raises, the values already produced are passed to delete
        (when given) and the exception propagates.
        """
        if func is None:
            raise TypeError("map needs a function")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result