"""User lifecycle service.

Orchestrates the four user use-cases over the repository and logger ports:

- validation and business rules run first and fail fast, untimed and unlogged;
- the single repository call that does the real work is bracketed by a
  "start" log line and an "end" log line carrying the elapsed milliseconds,
  the latter emitted even when the call fails;
- repository failures are logged once with the original exception and
  re-raised unchanged.

The service keeps no state between calls and is safe to share between
threads. The duplicate-name check and the following insert are not atomic;
two concurrent creates with the same name can both succeed.
"""

from __future__ import annotations

import time
import uuid
from typing import TYPE_CHECKING

from userbase.domain import User

from .errors import DuplicateNameError, UserNotFoundError, ValidationError
from .validators import CreateUserRequestValidator

if TYPE_CHECKING:
    from userbase.interfaces.cancellation import CancellationToken
    from userbase.interfaces.id_generator import IdGenerator
    from userbase.interfaces.logger import LoggerAdapter
    from userbase.interfaces.user_repository import UserRepository

    from .dtos import CreateUserRequest

# pylint: disable=broad-except


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class UserService:
    """Create, read and delete users.

    Args:
        repository: Storage port for users.
        logger: Logging port receiving templates and their arguments.
        id_generator: Source of new user ids. When omitted, random UUIDv4
            strings are used.
    """

    def __init__(
        self,
        repository: UserRepository,
        logger: LoggerAdapter,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._repository = repository
        self._logger = logger
        self._id_generator = id_generator
        self._validator = CreateUserRequestValidator()

    def list_all(self, cancel: CancellationToken | None = None) -> list[User]:
        """Return every stored user."""
        self._logger.info("Retrieving all users")

        start = time.perf_counter()
        try:
            return self._repository.get_all(cancel)
        except Exception as exc:
            self._logger.error(exc, "Something went wrong while retrieving all users")
            raise
        finally:
            self._logger.info("All users retrieved in %sms", _elapsed_ms(start))

    def get_by_id(
        self, user_id: str, cancel: CancellationToken | None = None
    ) -> User | None:
        """Return the user with `user_id`, or None when there is none."""
        self._logger.info("Retrieving user with id : %s", user_id)

        start = time.perf_counter()
        try:
            return self._repository.get_by_id(user_id, cancel)
        except Exception as exc:
            self._logger.error(
                exc, "Something went wrong while retrieving user with id : %s", user_id
            )
            raise
        finally:
            self._logger.info(
                "User with id : %s retrieved in %sms", user_id, _elapsed_ms(start)
            )

    def create(
        self, request: CreateUserRequest, cancel: CancellationToken | None = None
    ) -> bool:
        """Register a new user.

        Returns:
            The success flag reported by the repository.

        Raises:
            ValidationError: If the request breaks a validation rule.
            DuplicateNameError: If a user with the same full name exists.
        """
        if violations := self._validator.validate(request):
            raise ValidationError(violations)

        if self._repository.name_exists(request.full_name, cancel):
            raise DuplicateNameError(request.full_name)

        user = self.build_user(request)

        self._logger.info(
            "Creating user with id %s and name: %s", user.id, user.full_name
        )

        start = time.perf_counter()
        try:
            return self._repository.create(user, cancel)
        except Exception as exc:
            self._logger.error(exc, "Something went wrong while creating a user")
            raise
        finally:
            self._logger.info(
                "User with id: %s created in %sms", user.id, _elapsed_ms(start)
            )

    def delete_by_id(
        self, user_id: str, cancel: CancellationToken | None = None
    ) -> bool:
        """Delete the user with `user_id`.

        Returns:
            The success flag reported by the repository.

        Raises:
            UserNotFoundError: If no user has this id.
        """
        user = self._repository.get_by_id(user_id, cancel)
        if user is None:
            raise UserNotFoundError(user_id)

        self._logger.info("Deleting user with id : %s", user.id)

        start = time.perf_counter()
        try:
            return self._repository.delete(user, cancel)
        except Exception as exc:
            self._logger.error(exc, "Something went wrong while deleting user")
            raise
        finally:
            self._logger.info(
                "User with id: %s deleted in %sms", user.id, _elapsed_ms(start)
            )

    def build_user(self, request: CreateUserRequest) -> User:
        """Build a new `User` from `request` with a freshly minted id."""
        return User(id=self._new_id(), full_name=request.full_name)

    def _new_id(self) -> str:
        if self._id_generator is None:
            return str(uuid.uuid4())
        return self._id_generator.new_id()
