"""Interface for the user repository.

The repository owns durable user records. Every operation accepts an optional
`CancellationToken`; implementations must check it before touching storage.
Any storage-layer failure is raised as-is; the service logs it and re-raises
it unchanged.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from userbase.domain import User

    from .cancellation import CancellationToken


class UserRepository(abc.ABC):
    """Contract for persisting and retrieving users."""

    @abc.abstractmethod
    def get_all(self, cancel: CancellationToken | None = None) -> list[User]:
        """Return every stored user."""

    @abc.abstractmethod
    def get_by_id(
        self, user_id: str, cancel: CancellationToken | None = None
    ) -> User | None:
        """Return the user with `user_id`, or None if there is none."""

    @abc.abstractmethod
    def name_exists(
        self, full_name: str, cancel: CancellationToken | None = None
    ) -> bool:
        """Return True if a user with exactly this full name is stored."""

    @abc.abstractmethod
    def create(self, user: User, cancel: CancellationToken | None = None) -> bool:
        """Store a new user.

        Returns:
            True if a record was written, False otherwise.
        """

    @abc.abstractmethod
    def delete(self, user: User, cancel: CancellationToken | None = None) -> bool:
        """Remove a stored user.

        Returns:
            True if a record was removed, False otherwise.
        """
