# dsakit

Small, readable implementations of classic data structures:

- `SinglyLinkedList` and `DoublyLinkedList` (with their node classes `Node`
  and `DoublyNode`), in `dsakit.singly_linked_list` and
  `dsakit.doubly_linked_list`
- `Stack` (LIFO, built on a singly linked list), in `dsakit.stack`
- `Queue` (FIFO, built on a singly linked list), in `dsakit.queue`
- `HashTableChaining`, a fixed-capacity hash table that resolves collisions
  by chaining entries in doubly linked lists, in `dsakit.hash_table`
- the hash functions `hash_int`, `hash_str` and `hash_key`, in
  `dsakit.hashing`

## Installation

```
pip install .
```

## Usage

```python
from dsakit.singly_linked_list import SinglyLinkedList
from dsakit.doubly_linked_list import DoublyLinkedList
from dsakit.stack import Stack
from dsakit.queue import Queue
from dsakit.hash_table import HashTableChaining

items = SinglyLinkedList()
items.append(20)
items.append(30)
items.prepend(10)
print(list(items))        # [10, 20, 30]
print(items)              # 10 -> 20 -> 30 -> None
items.reverse()
print(items.front())      # 30

chain = DoublyLinkedList()
chain.append(1)
chain.append(2)
chain.insert_after(chain.head, 5)
print(list(chain))        # [1, 5, 2]

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.pop())        # 20
print(stack.top())        # 10

queue = Queue()
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue())    # 1
print(queue.front())      # 2

table = HashTableChaining(16)
table.insert("apple", 3)
print(table.get("apple")) # 3
print(table.get("pear"))  # None
print("banana" in table)  # False
print(len(table))         # 1
```

## Errors

- Reading from an empty structure (`front()` or `back()` on an empty list,
  `top()` or `pop()` on an empty stack, `front()`, `back()` or `dequeue()` on
  an empty queue, `remove_front()` on an empty singly linked list) raises
  `IndexError`.
- `remove()` on a linked list raises `ValueError` when the element is not
  there; `insert_after(None, ...)` and `remove_after()` with no following
  node raise `ValueError`.
- `HashTableChaining.remove()` returns `False` for a missing key instead of
  raising; a capacity below 1 raises `ValueError`.
- Hash table keys must be `int` or `str`; any other key type (including
  `bool`) raises `TypeError`.

## What this package does not do

- There is no double-ended queue type; use `DoublyLinkedList` directly for
  adding and removing at both ends.
- There are no command-line programs; everything is used as a library.
- The hash table never grows: its number of buckets is fixed when it is
  created.

## Running the tests

```
pip install .[test]
pytest
```