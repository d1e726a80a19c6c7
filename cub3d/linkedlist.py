"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One link of a list: a piece of content and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert content before the first node and return the new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append content after the last node and return the new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def remove_first(self, delete: Deleter = None) -> Any:
        """Unlink the first node, pass its content to delete if given, and return it."""
        node = self.head
        if node is None:
            raise IndexError("remove_first from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing every content to delete in order if given."""
        while self.head is not None:
            self.remove_first(delete)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on the content of every node, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """A new list holding func applied to every content.

        If func raises, the contents already produced are passed to delete
        (when given) and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result