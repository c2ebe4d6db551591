"""`LoggerAdapter` backed by the standard library `logging` module."""

from __future__ import annotations

import logging

from userbase.interfaces.logger import LoggerAdapter


class StdlibLoggerAdapter(LoggerAdapter):
    """Forward service log events to a named `logging.Logger`.

    Templates and arguments are passed through untouched, so formatting is
    deferred to the logging machinery and skipped entirely when the level is
    disabled.

    Args:
        name: Logger name; defaults to this adapter's module logger.
    """

    def __init__(self, name: str | None = None) -> None:
        self._logger = logging.getLogger(name or __name__)

    @property
    def name(self) -> str:
        """Name of the underlying logger."""
        return self._logger.name

    def info(self, template: str, *args: object) -> None:
        self._logger.info(template, *args)

    def error(self, exc: BaseException | None, template: str, *args: object) -> None:
        self._logger.error(template, *args, exc_info=exc)
