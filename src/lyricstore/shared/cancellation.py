"""
Summary: Cooperative cancellation token passed through every blocking call.
Why: Let the host abort lookups and saves at the next I/O boundary.
"""

from __future__ import annotations

import threading
from typing import final


class OperationCancelledError(Exception):
    """Raised when a cancellation token fires during an operation."""

    def __init__(self, message: str = "Operation cancelled") -> None:
        super().__init__(message)


@final
class CancellationToken:
    """Thread-safe flag checked at each filesystem boundary."""

    def __init__(self, *, cancellable: bool = True) -> None:
        self._event = threading.Event()
        self._cancellable = cancellable

    def cancel(self) -> None:
        """Request cancellation; idempotent."""

        if not self._cancellable:
            raise RuntimeError("This token cannot be cancelled")
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def check(self) -> None:
        """Raise ``OperationCancelledError`` once cancellation was requested."""

        if self._event.is_set():
            raise OperationCancelledError()


NEVER_CANCELLED = CancellationToken(cancellable=False)


__all__ = ["CancellationToken", "NEVER_CANCELLED", "OperationCancelledError"]
