"""Database plumbing: engine factory, shared metadata and table definitions."""

from .engine import is_sqlite, make_engine
from .metadata import metadata
from .schema import create_schema, schema_initialized, users

__all__ = [
    "create_schema",
    "is_sqlite",
    "make_engine",
    "metadata",
    "schema_initialized",
    "users",
]
