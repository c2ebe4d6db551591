"""ID generators for USERBASE users."""

import threading
import uuid

from ulid import monotonic

from userbase.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """Random UUIDv4 ids (the default for new users).

    Canonical 36-character hyphenated form, e.g.
    ``"1b4e28ba-2fa1-4d3b-a3f5-ef19b5a7633b"``.
    """

    def new_id(self) -> str:
        return str(uuid.uuid4())


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID ids.

    ULIDs are 26 characters and sort lexicographically by creation time,
    which keeps ids created in one process in insertion order. Backed by the
    `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded ids, starting at 1.

    Note:
        Predictable and process-local; for tests and demos only.
    """

    def __init__(self, length: int = 36) -> None:
        self._lock = threading.Lock()
        self._counter = 0
        self._length = length

    def new_id(self) -> str:
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"
