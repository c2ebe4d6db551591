"""Service layer for USERBASE.

Implements the application use-cases: the user lifecycle service, the input
validator and the business failure kinds callers can match on. Talks to
storage and logging only through the ports in `userbase.interfaces`.

Dependency rule: may import `userbase.domain` and `userbase.interfaces`, but
not `userbase.adapters` or `userbase.entrypoints`.
"""

from .dtos import CreateUserRequest
from .errors import (
    DuplicateNameError,
    FailureKind,
    UserNotFoundError,
    UserServiceError,
    ValidationError,
)
from .user_service import UserService
from .validators import CreateUserRequestValidator

__all__ = [
    "CreateUserRequest",
    "CreateUserRequestValidator",
    "DuplicateNameError",
    "FailureKind",
    "UserNotFoundError",
    "UserService",
    "UserServiceError",
    "ValidationError",
]
