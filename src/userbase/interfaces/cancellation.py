"""Cooperative cancellation signal passed through repository calls.

A `CancellationToken` is created by the caller and handed to every service
operation. The service never inspects it; repositories check it before doing
any work and raise `OperationCancelledError` once it has been tripped.
"""

from __future__ import annotations

import threading


class OperationCancelledError(Exception):
    """Raised by a repository when the caller cancelled the operation."""

    def __init__(self, operation: str | None = None) -> None:
        message = (
            f"Operation '{operation}' was cancelled"
            if operation
            else "Operation was cancelled"
        )
        super().__init__(message)
        self.operation = operation


class CancellationToken:
    """Thread-safe, one-way cancellation flag.

    Once `cancel()` has been called the token stays cancelled; it cannot be
    reset. Safe to share between the thread that cancels and the thread doing
    the work.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """True once `cancel()` has been called."""
        return self._event.is_set()

    def raise_if_cancelled(self, operation: str | None = None) -> None:
        """Raise `OperationCancelledError` if cancellation was requested.

        Args:
            operation: Optional name of the operation, used in the message.
        """
        if self.cancelled:
            raise OperationCancelledError(operation)


def check_cancelled(cancel: CancellationToken | None, operation: str) -> None:
    """Raise if `cancel` is set. A missing token never cancels."""
    if cancel is not None:
        cancel.raise_if_cancelled(operation)
