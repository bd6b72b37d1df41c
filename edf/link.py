"""Singly linked containers: queue, double-ended queue, list and stack."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar, Union

T = TypeVar("T")

Matcher = Union[T, Callable[[T], bool]]


def _matcher(item_or_predicate: Any) -> Callable[[Any], bool]:
    """Turn an item or a predicate into a predicate.

    A callable is used as the predicate itself; anything else matches by
    identity.
    """
    if callable(item_or_predicate):
        return item_or_predicate
    if item_or_predicate is None:
        raise ValueError("item must not be None")
    target = item_or_predicate
    return lambda candidate: candidate is target


class Link(Generic[T]):
    """Ordered collection of object references with head and tail access."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def head(self) -> Optional[T]:
        """Return the first item, or None when empty."""
        return self._items[0] if self._items else None

    def tail(self) -> Optional[T]:
        """Return the last item, or None when empty."""
        return self._items[-1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def get(self, index: int) -> Optional[T]:
        """Return the item at ``index`` counted from the head, or None."""
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def __getitem__(self, index: int) -> T:
        item = self.get(index)
        if item is None:
            raise IndexError(f"index {index} out of range")
        return item

    def exists(self, item_or_predicate: Matcher) -> bool:
        """Tell whether an item (by identity) or a predicate match is present."""
        return self.find(item_or_predicate) is not None

    def find(self, item_or_predicate: Matcher) -> Optional[T]:
        """Return the first matching item, or None."""
        match = _matcher(item_or_predicate)
        return next((item for item in self._items if match(item)), None)

    def for_each(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item from head to tail.

        The items are taken up front, so ``func`` may remove the item it is
        given.
        """
        for item in tuple(self._items):
            func(item)

    def clean(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on each item from the head and unlink it, emptying the link."""
        while self._items:
            func(self._items[0])
            self._unlink_head()

    # Linking primitives shared by the concrete containers.

    @staticmethod
    def _check(content: Any) -> None:
        if content is None:
            raise ValueError("cannot link None")

    def _link_head(self, content: T) -> None:
        self._check(content)
        self._items.appendleft(content)

    def _link_tail(self, content: T) -> None:
        self._check(content)
        self._items.append(content)

    def _link_sort(self, content: T, before: Callable[[T], bool]) -> None:
        """Insert ``content`` before the first item for which ``before`` holds."""
        self._check(content)
        for position, existing in enumerate(self._items):
            if before(existing):
                self._items.insert(position, content)
                return
        self._items.append(content)

    def _unlink_head(self) -> Optional[T]:
        return self._items.popleft() if self._items else None

    def _unlink_tail(self) -> Optional[T]:
        return self._items.pop() if self._items else None

    def _unlink_item(self, item_or_predicate: Matcher) -> Optional[T]:
        match = _matcher(item_or_predicate)
        for position, existing in enumerate(self._items):
            if match(existing):
                del self._items[position]
                return existing
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class Queue(Link[T]):
    """First in, first out."""

    def push(self, item: T) -> None:
        self._link_tail(item)

    def pop(self) -> Optional[T]:
        """Remove and return the oldest item, or None when empty."""
        return self._unlink_head()


class DeQueue(Link[T]):
    """Double-ended queue."""

    def push_head(self, item: T) -> None:
        self._link_head(item)

    def push_tail(self, item: T) -> None:
        self._link_tail(item)

    def pop_head(self) -> Optional[T]:
        return self._unlink_head()

    def pop_tail(self) -> Optional[T]:
        return self._unlink_tail()


class List(Link[T]):
    """List with head, tail, sorted and arbitrary removal."""

    def add_head(self, item: T) -> None:
        self._link_head(item)

    def add_tail(self, item: T) -> None:
        self._link_tail(item)

    def add_sort(self, item: T, before: Callable[[T], bool]) -> None:
        """Insert ``item`` before the first existing item for which ``before`` is true.

        When no item satisfies ``before`` the new item goes to the tail.
        """
        self._link_sort(item, before)

    def remove_head(self) -> Optional[T]:
        return self._unlink_head()

    def remove_tail(self) -> Optional[T]:
        return self._unlink_tail()

    def remove_item(self, item_or_predicate: Matcher) -> Optional[T]:
        """Remove the first item matching by identity or predicate; return it or None."""
        return self._unlink_item(item_or_predicate)


class Stack(Link[T]):
    """Last in, first out."""

    def push(self, item: T) -> None:
        self._link_head(item)

    def pop(self) -> Optional[T]:
        """Remove and return the newest item, or None when empty."""
        return self._unlink_head()