"""Validation rules for user service inputs."""

from .dtos import CreateUserRequest

MIN_FULL_NAME_LENGTH = 3

EMPTY_FULL_NAME_MSG = "Full name cannot be empty"
SHORT_FULL_NAME_MSG = f"Full name must be at least {MIN_FULL_NAME_LENGTH} characters"

# pylint: disable=too-few-public-methods


class CreateUserRequestValidator:
    """Checks the shape of a `CreateUserRequest`.

    All rules are evaluated; a request can collect more than one violation
    (an empty name is both blank and too short).
    """

    def validate(self, request: CreateUserRequest) -> list[str]:
        """Return the violation messages for `request`; empty means valid."""
        full_name = request.full_name or ""
        violations: list[str] = []
        if not full_name.strip():
            violations.append(EMPTY_FULL_NAME_MSG)
        if len(full_name) < MIN_FULL_NAME_LENGTH:
            violations.append(SHORT_FULL_NAME_MSG)
        return violations
