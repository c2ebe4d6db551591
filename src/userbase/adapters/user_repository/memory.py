"""In-memory UserRepository implementation for tests and demos."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from userbase.interfaces.cancellation import check_cancelled
from userbase.interfaces.user_repository import UserRepository

if TYPE_CHECKING:
    from userbase.domain import User
    from userbase.interfaces.cancellation import CancellationToken


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository keyed by user id.

    Users are returned in insertion order. Not thread-safe.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[str, User] = {user.id: user for user in users}

    def get_all(self, cancel: CancellationToken | None = None) -> list[User]:
        check_cancelled(cancel, "get_all")
        return list(self._users.values())

    def get_by_id(
        self, user_id: str, cancel: CancellationToken | None = None
    ) -> User | None:
        check_cancelled(cancel, "get_by_id")
        return self._users.get(user_id)

    def name_exists(
        self, full_name: str, cancel: CancellationToken | None = None
    ) -> bool:
        check_cancelled(cancel, "name_exists")
        return any(user.full_name == full_name for user in self._users.values())

    def create(self, user: User, cancel: CancellationToken | None = None) -> bool:
        check_cancelled(cancel, "create")
        if user.id in self._users:
            return False
        self._users[user.id] = user
        return True

    def delete(self, user: User, cancel: CancellationToken | None = None) -> bool:
        check_cancelled(cancel, "delete")
        return self._users.pop(user.id, None) is not None
