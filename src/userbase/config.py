"""Configuration utilities for USERBASE.

Configuration is read from the environment:

- ``USERBASE_DB_URL``: SQLAlchemy database URL (required by anything that
  touches the database).
- ``USERBASE_ID_GENERATOR``: how new user ids are minted, ``uuid4``
  (default) or ``ulid``.
"""

from __future__ import annotations

import os
from enum import Enum

DB_URL_ENV = "USERBASE_DB_URL"  # pragma: no mutate
ID_GENERATOR_ENV = "USERBASE_ID_GENERATOR"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the USERBASE_DB_URL environment variable is not set."""


class UnknownIdGeneratorError(ValueError):
    """Raised when USERBASE_ID_GENERATOR names an unsupported generator."""

    def __init__(self, value: str) -> None:
        choices = ", ".join(kind.value for kind in IdGeneratorKind)
        super().__init__(
            f"Unknown id generator {value!r} in {ID_GENERATOR_ENV}; "
            f"expected one of: {choices}"
        )
        self.value = value


class IdGeneratorKind(str, Enum):
    """Supported user id formats."""

    UUID4 = "uuid4"
    ULID = "ulid"


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `USERBASE_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `USERBASE_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_id_generator_kind() -> IdGeneratorKind:
    """Get the configured id generator kind.

    Unset or empty means `IdGeneratorKind.UUID4`. Matching is
    case-insensitive and ignores surrounding whitespace.

    Raises:
        UnknownIdGeneratorError: If the value is not a known kind.
    """
    raw = (os.environ.get(ID_GENERATOR_ENV) or "").strip().lower()
    if not raw:
        return IdGeneratorKind.UUID4
    try:
        return IdGeneratorKind(raw)
    except ValueError as e:
        raise UnknownIdGeneratorError(raw) from e
