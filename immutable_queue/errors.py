"""Error types.

There is a single failure mode: trying to store an absence value in a queue.
"""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when `None` or `NO_VALUE` is offered as a queue element."""

    code = "invalid_argument"

    def __init__(self, message: str = "item must not be None or NO_VALUE") -> None:
        super().__init__(message)
        self.message = message
