"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node that follows it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that iterates over the contents of its nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Insert a new node holding ``content`` at the start and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append a new node holding ``content`` at the end and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def remove(self, node: Node, delete: Callable[[Any], None] | None = None) -> None:
        """Unlink ``node`` from the list, passing its content to ``delete``.

        Raises ValueError when the node does not belong to this list.
        """
        previous: Node | None = None
        for current in self._nodes():
            if current is node:
                if previous is None:
                    self.head = current.next
                else:
                    previous.next = current.next
                current.next = None
                if delete is not None:
                    delete(current.content)
                return
            previous = current
        raise ValueError("node is not part of this list")

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Empty the list, passing every content to ``delete`` in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            node.next = None
            if delete is not None:
                delete(node.content)
            node = following

    def each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for every content.

        If ``func`` raises, the contents produced so far are passed to
        ``delete`` and the exception propagates.
        """
        result = LinkedList()
        for content in self:
            try:
                mapped = func(content)
            except Exception:
                result.clear(delete)
                raise
            result.add_back(mapped)
        return result