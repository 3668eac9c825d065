"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """A singly linked list that keeps its values in insertion order."""

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, value: T) -> None:
        """Insert ``value`` at the start of the list."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Optional[T]:
        """The last value, or None when the list is empty."""
        return None if self._tail is None else self._tail.value

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Empty the list, passing each value to ``delete`` first when given."""
        if delete is not None:
            for value in self:
                delete(value)
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every value in order."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[T], U],
        delete: Optional[Callable[[U], Any]] = None,
    ) -> LinkedList[U]:
        """Return a new list of ``func(value)`` for every value.

        If ``func`` raises, the values already produced are passed to
        ``delete`` (when given) and the exception propagates.
        """
        result: LinkedList[U] = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def remove(self, key: Any, delete: Optional[Callable[[T], Any]] = None) -> bool:
        """Remove the first value equal to ``key``.

        The removed value is passed to ``delete`` when given. Returns True
        if a value was removed.
        """
        previous: Optional[_Node[T]] = None
        for node in self._nodes():
            if node.value == key:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                if delete is not None:
                    delete(node.value)
                return True
            previous = node
        return False