from __future__ import annotations

# Persistent FIFO queue.
#
# The backing store is a tuple that is copied in full by `enqueue` and
# `dequeue` (O(n) per call). No instance is ever modified after construction,
# so a queue can be read from any number of threads without a lock.

import enum
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import InvalidArgument

T = TypeVar("T")


class NoValue(enum.Enum):
    """Sentinel returned by `head()` on an empty queue."""

    NO_VALUE = "NO_VALUE"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE = NoValue.NO_VALUE


def _is_absent(item: Any) -> bool:
    return item is None or item is NO_VALUE


@dataclass(frozen=True)
class ImmutableQueue(Generic[T]):
    """Immutable FIFO queue.

    `ImmutableQueue()` is the empty queue. Items are kept front to back:
    index 0 is the head, the last index is the tail.

    All items are permitted except `None` and `NO_VALUE`.
    """

    items: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        # A str is iterable but is one element, not a sequence of them.
        if isinstance(self.items, (str, bytes)):
            raise TypeError("items must be an iterable of elements, not str or bytes")
        items = tuple(self.items)
        if any(_is_absent(i) for i in items):
            raise InvalidArgument()
        object.__setattr__(self, "items", items)

    def enqueue(self, item: T) -> ImmutableQueue[T]:
        """Return a new queue with `item` added at the tail.

        Raises:
            InvalidArgument: if `item` is `None` or `NO_VALUE`.
        """
        if _is_absent(item):
            raise InvalidArgument()
        return ImmutableQueue(self.items + (item,))

    def dequeue(self) -> ImmutableQueue[T]:
        """Return a new queue without the head item.

        Dequeuing an empty queue yields another (new) empty queue.
        """
        if self.is_empty():
            return ImmutableQueue()
        return ImmutableQueue(self.items[1:])

    def head(self) -> T | NoValue:
        """Return the head of the queue, or `NO_VALUE` if the queue is empty."""
        if self.is_empty():
            return NO_VALUE
        return self.items[0]

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def __len__(self) -> int:
        return len(self.items)
