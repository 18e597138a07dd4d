"""Singly linked list with a sentinel head node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class Node(Generic[T]):
    """A node of a singly linked list."""

    data: T
    next: Optional["Node[T]"] = field(default=None, repr=False)


class SinglyLinkedList(Generic[T]):
    """A singly linked list that keeps track of its last node."""

    def __init__(self) -> None:
        self._dummy: Node[Any] = Node(None)
        self._tail: Optional[Node[T]] = None

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._dummy.next
        while node is not None:
            yield node
            node = node.next

    # Core operations

    def append(self, data: T) -> None:
        """Add ``data`` at the end of the list."""
        node = Node(data)
        if self._tail is None:
            self._dummy.next = node
        else:
            self._tail.next = node
        self._tail = node

    def prepend(self, data: T) -> None:
        """Add ``data`` at the start of the list."""
        node = Node(data, self._dummy.next)
        self._dummy.next = node
        if self._tail is None:
            self._tail = node

    def print_list(self) -> None:
        """Print the list's elements joined by arrows."""
        print(self)

    def __str__(self) -> str:
        return "".join(f"{data} -> " for data in self) + "None"

    # Accessors

    def front(self) -> T:
        """Return the first element."""
        if self.is_empty():
            raise IndexError("List is empty. No front element.")
        return self._dummy.next.data

    def back(self) -> T:
        """Return the last element."""
        if self._tail is None:
            raise IndexError("List is empty. No back element.")
        return self._tail.data

    def is_empty(self) -> bool:
        return self._dummy.next is None

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None when the list is empty."""
        return self._dummy.next

    @property
    def tail(self) -> Optional[Node[T]]:
        """The last node, or None when the list is empty."""
        return self._tail

    # Search

    def __contains__(self, data: object) -> bool:
        return self.find(data) is not None

    def find(self, data: object) -> Optional[Node[T]]:
        """Return the first node holding ``data``, or None."""
        return next((node for node in self._nodes() if node.data == data), None)

    # Modifiers

    def remove(self, data: object) -> None:
        """Remove the first node holding ``data``."""
        prev: Node[Any] = self._dummy
        node = prev.next
        while node is not None:
            if node.data == data:
                prev.next = node.next
                if node is self._tail:
                    self._tail = None if prev is self._dummy else prev
                return
            prev, node = node, node.next
        raise ValueError("Element not found. Cannot remove.")

    def remove_front(self) -> None:
        """Remove the first node."""
        first = self._dummy.next
        if first is None:
            raise IndexError("List is empty. Cannot remove front.")
        self._dummy.next = first.next
        if self._dummy.next is None:
            self._tail = None

    def insert_after(self, target: Optional[Node[T]], data: T) -> None:
        """Insert ``data`` right after the node ``target``."""
        if target is None:
            raise ValueError("Target node is None.")
        node = Node(data, target.next)
        target.next = node
        if target is self._tail:
            self._tail = node

    def remove_after(self, target: Optional[Node[T]]) -> None:
        """Remove the node that follows ``target``."""
        if target is None or target.next is None:
            raise ValueError("Invalid target node.")
        removed = target.next
        target.next = removed.next
        if removed is self._tail:
            self._tail = target

    def clear(self) -> None:
        self._dummy.next = None
        self._tail = None

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        prev: Optional[Node[T]] = None
        node = self._dummy.next
        self._tail = node
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self._dummy.next = prev