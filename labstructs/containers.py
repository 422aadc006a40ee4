"""Linked lists, queues and stacks with explicit empty and full errors."""

from __future__ import annotations

import bisect
import sys
from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, Sequence, TypeVar

from .indexed_list import SinglyLinkedList, _Node, _render, _walk

T = TypeVar("T")
N = TypeVar("N")

DEFAULT_CAPACITY = 100


class EmptyError(Exception):
    """Raised when reading or removing from an empty container."""


class FullError(Exception):
    """Raised when adding to a container that has reached its capacity."""


@dataclass
class _DNode(_Node[T]):
    prev: Optional["_DNode[T]"] = None


def _require(node: Optional[N], message: str) -> N:
    """Return ``node``, raising :class:`EmptyError` with ``message`` if it is missing."""
    if node is None:
        raise EmptyError(message)
    return node


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


class LinkedList(Generic[T]):
    """Singly linked list with operations at both ends."""

    def __init__(self) -> None:
        self._items: SinglyLinkedList[T] = SinglyLinkedList()

    def _nonempty(self) -> SinglyLinkedList[T]:
        if self._items.empty():
            raise EmptyError("Empty list")
        return self._items

    def add_front(self, value: T) -> None:
        self._items.push_front(value)

    def add_back(self, value: T) -> None:
        self._items.push_back(value)

    def remove_front(self) -> T:
        return self._nonempty().pop_front()

    def remove_back(self) -> T:
        return self._nonempty().pop_back()

    def peek_front(self) -> T:
        return self._nonempty().at(0)

    def peek_back(self) -> T:
        items = self._nonempty()
        return items.at(len(items) - 1)

    def is_empty(self) -> bool:
        return self._items.empty()

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return str(self._items)


class DoublyLinkedList(Generic[T]):
    """Doubly linked list with constant-time operations at both ends."""

    def __init__(self) -> None:
        self._head: Optional[_DNode[T]] = None
        self._tail: Optional[_DNode[T]] = None

    def add_front(self, value: T) -> None:
        node = _DNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node

    def add_back(self, value: T) -> None:
        node = _DNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node

    def remove_front(self) -> T:
        value = self.peek_front()
        self._head = self._head.next  # type: ignore[union-attr]
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        return value

    def remove_back(self) -> T:
        value = self.peek_back()
        self._tail = self._tail.prev  # type: ignore[union-attr]
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        return value

    def peek_front(self) -> T:
        return _require(self._head, "Empty list").data

    def peek_back(self) -> T:
        return _require(self._tail, "Empty list").data

    def is_empty(self) -> bool:
        return self._head is None

    def __iter__(self) -> Iterator[T]:
        return _walk(self._head)

    def __reversed__(self) -> Iterator[T]:
        return _walk(self._tail, "prev")

    def __str__(self) -> str:
        return _render(self, " <-> ")


class ArrayQueue(Generic[T]):
    """FIFO queue stored in a fixed-size circular buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._slots: List[Optional[T]] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: T) -> None:
        if self.is_full():
            raise FullError("Queue full")
        self._slots[(self._front + self._count) % len(self._slots)] = value
        self._count += 1

    def dequeue(self) -> T:
        value = self.peek()
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        return value

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyError("Queue empty")
        return self._slots[self._front]  # type: ignore[return-value]

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def __len__(self) -> int:
        return self._count


class LinkedListQueue(Generic[T]):
    """Unbounded FIFO queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: Optional[_Node[T]] = None
        self._rear: Optional[_Node[T]] = None

    def enqueue(self, value: T) -> None:
        node = _Node(value)
        if self._rear is not None:
            self._rear.next = node
        self._rear = node
        if self._front is None:
            self._front = node

    def dequeue(self) -> T:
        front = _require(self._front, "Queue empty")
        self._front = front.next
        if self._front is None:
            self._rear = None
        return front.data

    def peek(self) -> T:
        return _require(self._front, "Queue empty").data

    def is_empty(self) -> bool:
        return self._front is None

    def is_full(self) -> bool:
        """An unbounded queue is never full."""
        return False


class PriorityQueue(Generic[T]):
    """Unbounded queue that always yields its largest value first."""

    def __init__(self) -> None:
        # Kept in ascending order; the largest value sits at the end.
        self._items: List[T] = []

    def enqueue(self, value: T) -> None:
        bisect.insort(self._items, value)

    def dequeue(self) -> T:
        self.peek()
        return self._items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyError("Queue empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        """An unbounded queue is never full."""
        return False

    def __len__(self) -> int:
        return len(self._items)


class ArrayStack(Generic[T]):
    """LIFO stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        _check_capacity(capacity)
        self._capacity = capacity
        self._items: List[T] = []

    def push(self, value: T) -> None:
        if self.is_full():
            raise FullError("Stack full")
        self._items.append(value)

    def pop(self) -> T:
        self.peek()
        return self._items.pop()

    def peek(self) -> T:
        if self.is_empty():
            raise EmptyError("Stack empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)


class LinkedListStack(Generic[T]):
    """Unbounded LIFO stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Optional[_Node[T]] = None

    def push(self, value: T) -> None:
        self._top = _Node(value, self._top)

    def pop(self) -> T:
        top = _require(self._top, "Stack empty")
        self._top = top.next
        return top.data

    def peek(self) -> T:
        return _require(self._top, "Stack empty").data

    def is_empty(self) -> bool:
        return self._top is None

    def is_full(self) -> bool:
        """An unbounded stack is never full."""
        return False


def demo_lines() -> List[str]:
    """Exercise each container and return the lines the demo prints."""
    sll: LinkedList[int] = LinkedList()
    sll.add_front(10)
    sll.add_back(20)

    dll: DoublyLinkedList[int] = DoublyLinkedList()
    dll.add_front(100)
    dll.add_back(200)

    aq: ArrayQueue[int] = ArrayQueue()
    lq: LinkedListQueue[str] = LinkedListQueue()
    pq: PriorityQueue[int] = PriorityQueue()
    for queue, values in ((aq, (1, 2)), (lq, ("Hello", "World")), (pq, (5, 2, 9))):
        for value in values:
            queue.enqueue(value)

    arr_stack: ArrayStack[int] = ArrayStack()
    ls: LinkedListStack[str] = LinkedListStack()
    for stack, values in ((arr_stack, (50, 60)), (ls, ("Stack", "Top"))):
        for value in values:
            stack.push(value)

    peeked = (
        ("ArrayQueue", aq),
        ("LinkedListQueue", lq),
        ("PriorityQueue", pq),
        ("ArrayStack", arr_stack),
        ("LinkedListStack", ls),
    )
    return [str(sll), str(dll)] + [
        f"{name} peek: {container.peek()}" for name, container in peeked
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the container demonstration."""
    for line in demo_lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())