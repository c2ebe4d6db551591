"""Fixtures for UserRepository contract tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from userbase.adapters.user_repository import (
    InMemoryUserRepository,
    SqlAlchemyUserRepository,
)
from userbase.interfaces.user_repository import UserRepository


@pytest.fixture(params=["memory", "sqlite_memory", "sqlite_file", "postgres"])
def user_repository(request: pytest.FixtureRequest) -> Iterator[UserRepository]:
    """Return an empty UserRepository for the requested backend.

    Supported params:
      - `"memory"` → InMemoryUserRepository
      - `"sqlite_memory"` → SqlAlchemyUserRepository on in-memory SQLite
      - `"sqlite_file"` → SqlAlchemyUserRepository on a temp SQLite file
      - `"postgres"` → SqlAlchemyUserRepository on a Testcontainers Postgres
        (skipped when Docker is not available)

    Engine fixtures are resolved lazily so only the requested backend is
    started.
    """
    match request.param:
        case "memory":
            yield InMemoryUserRepository()
        case "sqlite_memory":
            yield SqlAlchemyUserRepository(
                request.getfixturevalue("sqlite_engine_memory")
            )
        case "sqlite_file":
            yield SqlAlchemyUserRepository(request.getfixturevalue("sqlite_engine_file"))
        case "postgres":
            yield SqlAlchemyUserRepository(request.getfixturevalue("postgres_engine"))
        case _:
            raise ValueError(f"unknown user repository type: {request.param}")
