"""FIFO queue backed by a singly linked list."""

from __future__ import annotations

from typing import Generic, TypeVar

from .singly_linked_list import SinglyLinkedList

T = TypeVar("T")


class Queue(Generic[T]):
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._list: SinglyLinkedList[T] = SinglyLinkedList()

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        self._list.append(value)

    def dequeue(self) -> T:
        """Remove the front element and return it."""
        if self.is_empty():
            raise IndexError("Queue is empty. Cannot dequeue.")
        value = self._list.front()
        self._list.remove_front()
        return value

    def front(self) -> T:
        """Return the element at the front."""
        return self._list.front()

    def back(self) -> T:
        """Return the element at the back."""
        return self._list.back()

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def __len__(self) -> int:
        return len(self._list)

    def clear(self) -> None:
        self._list.clear()