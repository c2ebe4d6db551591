"""Domain layer for USERBASE.

Holds the entities the rest of the application talks about. Framework-free:
no imports from other `userbase.*` packages.
"""

from .user import User

__all__ = ["User"]
