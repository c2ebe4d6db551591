"""Adapters (infrastructure) for USERBASE.

Concrete implementations of the ports in `userbase.interfaces`: user
repositories (in-memory and SQLAlchemy), the stdlib logging adapter, id
generators, plus the database engine factory and table metadata.

Dependency rule: may import `userbase.domain` and `userbase.interfaces`; the
domain and service layer must not import this package.
"""
