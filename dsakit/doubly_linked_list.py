"""Doubly linked list with sentinel nodes at both ends."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class DoublyNode(Generic[T]):
    """A node of a doubly linked list."""

    data: T
    prev: Optional["DoublyNode[T]"] = field(default=None, repr=False)
    next: Optional["DoublyNode[T]"] = field(default=None, repr=False)


class DoublyLinkedList(Generic[T]):
    """A doubly linked list bounded by two sentinel nodes."""

    def __init__(self) -> None:
        self._first: DoublyNode[Any] = DoublyNode(None)
        self._last: DoublyNode[Any] = DoublyNode(None)
        self._first.next = self._last
        self._last.prev = self._first

    def _nodes(self) -> Iterator[DoublyNode[T]]:
        node = self._first.next
        while node is not self._last:
            yield node
            node = node.next

    @staticmethod
    def _link_after(anchor: DoublyNode[Any], data: T) -> None:
        node = DoublyNode(data, anchor, anchor.next)
        anchor.next.prev = node
        anchor.next = node

    # Core operations

    def append(self, data: T) -> None:
        """Add ``data`` at the end of the list."""
        self._link_after(self._last.prev, data)

    def prepend(self, data: T) -> None:
        """Add ``data`` at the start of the list."""
        self._link_after(self._first, data)

    def print_list(self) -> None:
        """Print the list's elements joined by double arrows."""
        print(self)

    def __str__(self) -> str:
        return "".join(f"{data} <-> " for data in self) + "None"

    # Accessors

    def front(self) -> T:
        """Return the first element."""
        if self.is_empty():
            raise IndexError("List is empty. No front element.")
        return self._first.next.data

    def back(self) -> T:
        """Return the last element."""
        if self.is_empty():
            raise IndexError("List is empty. No back element.")
        return self._last.prev.data

    def is_empty(self) -> bool:
        return self._first.next is self._last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    @property
    def head(self) -> Optional[DoublyNode[T]]:
        """The first node, or None when the list is empty."""
        return None if self.is_empty() else self._first.next

    @property
    def tail(self) -> Optional[DoublyNode[T]]:
        """The last node, or None when the list is empty."""
        return None if self.is_empty() else self._last.prev

    # Search

    def __contains__(self, data: object) -> bool:
        return self.find(data) is not None

    def find(self, data: object) -> Optional[DoublyNode[T]]:
        """Return the first node holding ``data``, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    # Modifiers

    def remove(self, data: object) -> None:
        """Remove the first node holding ``data``."""
        node = self.find(data)
        if node is None:
            raise ValueError("Element not found. Cannot remove.")
        node.prev.next = node.next
        node.next.prev = node.prev

    def insert_after(self, target: Optional[DoublyNode[T]], data: T) -> None:
        """Insert ``data`` right after the node ``target``."""
        if target is None:
            raise ValueError("Target node is None.")
        self._link_after(target, data)

    def remove_after(self, target: Optional[DoublyNode[T]]) -> None:
        """Remove the node that follows ``target``."""
        if target is None or target.next is None or target.next is self._last:
            raise ValueError("Invalid target node.")
        removed = target.next
        target.next = removed.next
        removed.next.prev = target

    def clear(self) -> None:
        self._first.next = self._last
        self._last.prev = self._first

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        node: Optional[DoublyNode[Any]] = self._first
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._first, self._last = self._last, self._first