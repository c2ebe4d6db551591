"""UserRepository implementation using SQLAlchemy Core.

Each operation runs in its own transaction on a fresh connection from the
engine's pool, so a successful `create` or `delete` is committed by the time
it returns. Database errors (`sqlalchemy.exc.SQLAlchemyError` and subclasses)
are not caught here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import delete, exists, insert, select

from userbase.adapters.db.schema import users
from userbase.domain import User
from userbase.interfaces.cancellation import check_cancelled
from userbase.interfaces.user_repository import UserRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine, Row

    from userbase.interfaces.cancellation import CancellationToken


def _row_to_user(row: Row) -> User:
    return User(id=row.id, full_name=row.full_name)


class SqlAlchemyUserRepository(UserRepository):
    """UserRepository backed by the `users` table (Postgres or SQLite)."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    # --- reads ---

    def get_all(self, cancel: CancellationToken | None = None) -> list[User]:
        check_cancelled(cancel, "get_all")
        stmt = select(users.c.id, users.c.full_name).order_by(
            users.c.full_name, users.c.id
        )
        with self.engine.connect() as conn:
            return [_row_to_user(row) for row in conn.execute(stmt)]

    def get_by_id(
        self, user_id: str, cancel: CancellationToken | None = None
    ) -> User | None:
        check_cancelled(cancel, "get_by_id")
        stmt = select(users.c.id, users.c.full_name).where(users.c.id == user_id)
        with self.engine.connect() as conn:
            if not (row := conn.execute(stmt).first()):
                return None
        return _row_to_user(row)

    def name_exists(
        self, full_name: str, cancel: CancellationToken | None = None
    ) -> bool:
        check_cancelled(cancel, "name_exists")
        stmt = select(exists().where(users.c.full_name == full_name))
        with self.engine.connect() as conn:
            return bool(conn.execute(stmt).scalar())

    # --- writes ---

    def create(self, user: User, cancel: CancellationToken | None = None) -> bool:
        check_cancelled(cancel, "create")
        stmt = insert(users).values(id=user.id, full_name=user.full_name)
        with self.engine.begin() as conn:
            result = conn.execute(stmt)
        return result.rowcount > 0

    def delete(self, user: User, cancel: CancellationToken | None = None) -> bool:
        check_cancelled(cancel, "delete")
        stmt = delete(users).where(users.c.id == user.id)
        with self.engine.begin() as conn:
            result = conn.execute(stmt)
        return result.rowcount > 0
