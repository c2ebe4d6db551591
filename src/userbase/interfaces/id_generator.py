"""Port for minting user ids."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Source of fresh user ids.

    Ids are opaque strings, never empty, never repeated by one generator, and
    no longer than the 36 characters the users table stores.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an id not handed out before."""
