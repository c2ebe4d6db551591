"""UserRepository implementations."""

from .memory import InMemoryUserRepository
from .sqlalchemy_repository import SqlAlchemyUserRepository

__all__ = ["InMemoryUserRepository", "SqlAlchemyUserRepository"]
