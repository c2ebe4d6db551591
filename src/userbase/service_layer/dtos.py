"""Input values accepted by the user service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserRequest:
    """Request to register a new user. Not persisted."""

    full_name: str
