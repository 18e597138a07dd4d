"""LIFO stack backed by a singly linked list."""

from __future__ import annotations

from typing import Generic, TypeVar

from .singly_linked_list import SinglyLinkedList

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._list: SinglyLinkedList[T] = SinglyLinkedList()

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._list.prepend(value)

    def pop(self) -> T:
        """Remove the top element and return it."""
        if self._list.is_empty():
            raise IndexError("Stack underflow: cannot pop from empty stack")
        value = self._list.front()
        self._list.remove_front()
        return value

    def top(self) -> T:
        """Return the top element without removing it."""
        return self._list.front()

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def __len__(self) -> int:
        return len(self._list)

    def clear(self) -> None:
        self._list.clear()