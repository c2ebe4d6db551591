"""Users table schema.

One row per user. `full_name` is indexed (not unique): duplicate names are
rejected by the service, not by the database.

| Constraint                      | Purpose                      |
|---------------------------------|------------------------------|
| PRIMARY KEY(id)                 | one row per user id          |
| CHECK(length(full_name) >= 1)   | no empty names at rest       |
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Column, Index, String, Table, inspect

from .metadata import metadata

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

__all__ = ["users", "create_schema", "schema_initialized"]

USERS_TABLE = "users"

users = Table(
    USERS_TABLE,
    metadata,
    Column(
        "id",
        String(36),
        primary_key=True,
        comment="Opaque user id (UUIDv4 or ULID), minted by the service.",
    ),
    Column(
        "full_name",
        String(200),
        nullable=False,
        comment="User's full name.",
    ),
    CheckConstraint("length(full_name) >= 1", name="full_name_not_empty"),
    Index(None, "full_name"),
    comment="Registered users.",
)


def create_schema(engine: Engine) -> None:
    """Create every USERBASE table that does not exist yet."""
    metadata.create_all(engine, checkfirst=True)


def schema_initialized(engine: Engine) -> bool:
    """Return True if the users table exists on `engine`."""
    return inspect(engine).has_table(USERS_TABLE)
