"""Pytest fixtures for user service unit tests."""

from __future__ import annotations

import pytest

from userbase.service_layer import UserService

from .fakes import FakeUserRepository, RecordingLogger

# pylint: disable=redefined-outer-name


@pytest.fixture
def logger() -> RecordingLogger:
    """A fresh recording logger."""
    return RecordingLogger()


@pytest.fixture
def repository() -> FakeUserRepository:
    """An empty, well-behaved fake repository. Tests replace it as needed."""
    return FakeUserRepository()


@pytest.fixture
def make_service(logger):
    """Factory building a `UserService` over a given repository and the shared logger."""

    def _make(repository: FakeUserRepository, **kwargs) -> UserService:
        return UserService(repository, logger, **kwargs)

    return _make


@pytest.fixture
def service(make_service, repository) -> UserService:
    """A `UserService` over the default fake repository."""
    return make_service(repository)
