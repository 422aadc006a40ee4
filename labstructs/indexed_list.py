"""A singly linked list with positional access, insertion and removal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


def _walk(node: Optional[_Node[T]], link: str = "next") -> Iterator[T]:
    """Yield the data of ``node`` and of every node reached through ``link``."""
    while node is not None:
        yield node.data
        node = getattr(node, link)


def _render(items: Iterable[object], separator: str) -> str:
    """Render values each followed by ``separator``, closed by ``nullptr``."""
    return "".join(f"{item}{separator}" for item in items) + "nullptr"


class SinglyLinkedList(Generic[T]):
    """Singly linked list keeping its length and supporting index-based edits."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _node_at(self, index: int) -> _Node[T]:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    @staticmethod
    def _check_index(index: int, limit: int) -> None:
        if not 0 <= index < limit:
            raise IndexError("Index out of range")

    def _require_items(self) -> None:
        if self._head is None:
            raise IndexError("List is empty")

    def push_front(self, value: T) -> None:
        """Add a value at the head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def push_back(self, value: T) -> None:
        """Add a value at the tail."""
        self.insert(self._size, value)

    def pop_front(self) -> T:
        """Remove and return the first value."""
        self._require_items()
        assert self._head is not None
        value = self._head.data
        self._head = self._head.next
        self._size -= 1
        return value

    def pop_back(self) -> T:
        """Remove and return the last value."""
        self._require_items()
        return self.erase(self._size - 1)

    def at(self, index: int) -> T:
        """Return the value at ``index``."""
        self._check_index(index, self._size)
        return self._node_at(index).data

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` so that it ends up at ``index``; ``index`` may equal the length."""
        self._check_index(index, self._size + 1)
        if index == 0:
            self.push_front(value)
            return
        previous = self._node_at(index - 1)
        previous.next = _Node(value, previous.next)
        self._size += 1

    def erase(self, index: int) -> T:
        """Remove and return the value at ``index``."""
        self._check_index(index, self._size)
        if index == 0:
            return self.pop_front()
        previous = self._node_at(index - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        self._size -= 1
        return removed.data

    def empty(self) -> bool:
        """Whether the list holds no values."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[T]:
        return _walk(self._head)

    def __str__(self) -> str:
        return _render(self, " -> ")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"