"""Persistent (immutable) FIFO queue.

Every mutating operation returns a new queue and leaves the receiver intact, so
a queue value can be handed to any number of threads without locking:
- `ImmutableQueue` is the queue value itself
- `SharedQueue` is an optional lock-guarded reference to the latest value

`head()` on an empty queue returns the `NO_VALUE` sentinel, never `None`.
"""

from .errors import InvalidArgument
from .fifo import NO_VALUE, ImmutableQueue, NoValue
from .shared import SharedQueue

__all__ = [
    "ImmutableQueue",
    "InvalidArgument",
    "NO_VALUE",
    "NoValue",
    "SharedQueue",
]
