"""A common collection interface with dynamic-array and linked-list implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Optional

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2


class Collection(ABC):
    """An ordered, indexable collection of items."""

    def __init__(self) -> None:
        self._count = 0

    @abstractmethod
    def find(self, item: Any) -> int:
        """Index of the first item equal to item, or -1 if there is none."""

    @abstractmethod
    def get(self, index: int) -> Any:
        """The item at index; raises IndexError if there is none."""

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def contains(self, item: Any) -> bool:
        """Whether an item equal to item is held."""
        return self.find(item) != -1

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    @abstractmethod
    def insert_at_beginning(self, item: Any) -> None:
        """Put item before every other item."""

    @abstractmethod
    def insert_at_end(self, item: Any) -> None:
        """Put item after every other item."""

    @abstractmethod
    def insert(self, item: Any, index: int) -> None:
        """Put item at index, moving later items back by one."""

    @abstractmethod
    def remove_at_beginning(self) -> None:
        """Drop the first item."""

    @abstractmethod
    def remove_at_end(self) -> None:
        """Drop the last item."""

    @abstractmethod
    def remove_at(self, index: int) -> None:
        """Drop the item at index."""

    def remove(self, item: Any) -> None:
        """Drop the first item equal to item, if there is one."""
        location = self.find(item)
        if location != -1:
            self.remove_at(location)

    def __len__(self) -> int:
        return self._count

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._count:
            raise IndexError(f"index {index} out of range for {self._count} items")

    def _check_insert_index(self, index: int) -> None:
        if not 0 <= index <= self._count:
            raise IndexError(f"cannot insert at {index} into {self._count} items")

    def _check_not_empty(self) -> None:
        if self._count == 0:
            raise IndexError("remove from an empty collection")


class DynamicArray(Collection):
    """A collection backed by storage of a set capacity that doubles when full."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__()
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The number of items the storage holds before it must grow."""
        return self._capacity

    def find(self, item: Any) -> int:
        for index, value in enumerate(self._items):
            if value == item:
                return index
        return -1

    def get(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def _grow_if_full(self) -> None:
        if self._count >= self._capacity:
            self.set_capacity(max(self._count * GROWTH_FACTOR, 1))

    def insert_at_beginning(self, item: Any) -> None:
        self.insert(item, 0)

    def insert_at_end(self, item: Any) -> None:
        self.insert(item, self._count)

    def insert(self, item: Any, index: int) -> None:
        self._check_insert_index(index)
        self._grow_if_full()
        self._items.insert(index, item)
        self._count += 1

    def remove_at_beginning(self) -> None:
        self._check_not_empty()
        self.remove_at(0)

    def remove_at_end(self) -> None:
        self._check_not_empty()
        self.remove_at(self._count - 1)

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        del self._items[index]
        self._count -= 1

    def set_capacity(self, capacity: int) -> None:
        """Change the capacity, discarding items beyond it."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if capacity == self._capacity:
            return
        del self._items[capacity:]
        self._capacity = capacity
        self._count = len(self._items)


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


class LinkedList(Collection):
    """A singly linked collection with head and tail references."""

    def __init__(self) -> None:
        super().__init__()
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None

    def _nodes(self) -> Iterator[_Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def _node_at(self, index: int) -> _Node:
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range for {self._count} items")

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.data

    def find(self, item: Any) -> int:
        for index, value in enumerate(self):
            if value == item:
                return index
        return -1

    def get(self, index: int) -> Any:
        self._check_index(index)
        return self._node_at(index).data

    def insert_at_beginning(self, item: Any) -> None:
        self._head = _Node(item, self._head)
        if self._tail is None:
            self._tail = self._head
        self._count += 1

    def insert_at_end(self, item: Any) -> None:
        if self._tail is None:
            self.insert_at_beginning(item)
            return
        node = _Node(item)
        self._tail.next = node
        self._tail = node
        self._count += 1

    def insert(self, item: Any, index: int) -> None:
        self._check_insert_index(index)
        if index == 0:
            self.insert_at_beginning(item)
        elif index == self._count:
            self.insert_at_end(item)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(item, before.next)
            self._count += 1

    def remove_at_beginning(self) -> None:
        self._check_not_empty()
        assert self._head is not None
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._count -= 1

    def remove_at_end(self) -> None:
        self._check_not_empty()
        if self._count == 1:
            self.remove_at_beginning()
            return
        before = self._node_at(self._count - 2)
        before.next = None
        self._tail = before
        self._count -= 1

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        if index == 0:
            self.remove_at_beginning()
        elif index == self._count - 1:
            self.remove_at_end()
        else:
            before = self._node_at(index - 1)
            assert before.next is not None
            before.next = before.next.next
            self._count -= 1