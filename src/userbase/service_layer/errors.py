"""Business failure kinds raised by the user service.

Every failure derives from `UserServiceError` and exposes a `kind` so callers
can branch with ``match err.kind`` instead of on exception classes:

    try:
        service.create(request)
    except UserServiceError as err:
        match err.kind:
            case FailureKind.VALIDATION: ...
            case FailureKind.DUPLICATE_NAME: ...

Storage failures are not part of this hierarchy; they surface as whatever the
repository raised.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import ClassVar


class FailureKind(str, Enum):
    """Discriminator for business failures."""

    VALIDATION = "validation"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"


class UserServiceError(Exception):
    """Base class for business-rule failures of the user service."""

    kind: ClassVar[FailureKind]


class ValidationError(UserServiceError):
    """Raised when a create request violates the validation rules.

    The message is the violations joined by ``", "``.
    """

    kind = FailureKind.VALIDATION

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations = tuple(violations)
        super().__init__(", ".join(self.violations))


class DuplicateNameError(UserServiceError):
    """Raised when a user with the requested full name already exists."""

    kind = FailureKind.DUPLICATE_NAME

    def __init__(self, full_name: str) -> None:
        super().__init__("Name already exist")
        self.full_name = full_name


class UserNotFoundError(UserServiceError):
    """Raised when the referenced user does not exist."""

    kind = FailureKind.NOT_FOUND

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id
