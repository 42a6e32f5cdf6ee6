"""A singly linked list of arbitrary items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    content: Any
    next: _Node | None = None


class LinkedList:
    """A singly linked list that grows at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for item in items:
            self.append(item)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` at the start of the list."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, item: Any) -> None:
        """Add ``item`` at the end of the list."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the final item; raise ``IndexError`` when the list is empty."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every item in order."""
        for item in self:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func(item)`` for every item."""
        return LinkedList(func(item) for item in self)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every item, passing each to ``delete`` first when given."""
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following