from __future__ import annotations

# Shared reference to an immutable queue.
#
# `ImmutableQueue` values never change, so the only thing threads can race on
# is *which* value is current. `SharedQueue` guards that reference with a lock;
# the snapshots it hands out can be read without it.

import logging
import threading
from typing import Generic, TypeVar

from .errors import InvalidArgument
from .fifo import ImmutableQueue, NoValue

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SharedQueue(Generic[T]):
    """Lock-guarded holder of the latest `ImmutableQueue` value."""

    def __init__(self, initial: ImmutableQueue[T] | None = None) -> None:
        self._lock = threading.Lock()
        self._current: ImmutableQueue[T] = initial if initial is not None else ImmutableQueue()

    def snapshot(self) -> ImmutableQueue[T]:
        """Return the current queue value."""
        with self._lock:
            return self._current

    def offer(self, item: T) -> ImmutableQueue[T]:
        """Append `item` and return the resulting snapshot.

        Raises:
            InvalidArgument: if `item` is `None` or `NO_VALUE`. The held
                queue is left as it was.
        """
        with self._lock:
            try:
                self._current = self._current.enqueue(item)
            except InvalidArgument:
                logger.debug("Rejected absent item, queue length stays %d", len(self._current))
                raise
            return self._current

    def poll(self) -> T | NoValue:
        """Remove and return the head, or `NO_VALUE` if the queue is empty."""
        with self._lock:
            item = self._current.head()
            self._current = self._current.dequeue()
            return item

    def is_empty(self) -> bool:
        return self.snapshot().is_empty()

    def __len__(self) -> int:
        return len(self.snapshot())
