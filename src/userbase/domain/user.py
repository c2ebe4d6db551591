"""The User entity."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """A registered user.

    Conventions:
      - `id` is an opaque identifier minted once at creation time and never
        reused. The dataclass is frozen so it cannot change afterwards.
      - `full_name` is the display name. Uniqueness is a service-level rule,
        not a storage constraint.
    """

    id: str
    full_name: str
