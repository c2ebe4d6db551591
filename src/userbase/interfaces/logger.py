"""Logger port used by the service layer.

The service hands over an unformatted template and its positional arguments
separately, so implementations (and test doubles) can see exactly which
template was used and with which values. Templates use `%`-style
placeholders, matching the standard library `logging` module.
"""

from __future__ import annotations

import abc


class LoggerAdapter(abc.ABC):
    """Contract for structured, parameterized logging."""

    @abc.abstractmethod
    def info(self, template: str, *args: object) -> None:
        """Record an informational event.

        Args:
            template: Message template with positional `%s` placeholders.
            *args: Values for the placeholders, in order.
        """

    @abc.abstractmethod
    def error(self, exc: BaseException | None, template: str, *args: object) -> None:
        """Record an error event together with the exception that caused it.

        Args:
            exc: The original exception instance (may be None).
            template: Message template with positional `%s` placeholders.
            *args: Values for the placeholders, in order.
        """
