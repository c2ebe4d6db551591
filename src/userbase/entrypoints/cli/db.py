"""USERBASE DB CLI - schema creation and status.

The schema is created straight from the table metadata; there is no migration
history. ``init`` is idempotent and only creates what is missing.

Failure modes
- Missing/invalid ``USERBASE_DB_URL`` -> ``ClickException`` with guidance.
- Unreachable database -> ``ClickException`` (``init``) or an error line
  (``status``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from userbase.adapters.db.schema import create_schema, schema_initialized

from .container import get_container
from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

CANNOT_CONNECT_MSG = (
    "USERBASE_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

INIT_SCHEMA_INSTRUCTIONS = "Run 'userbase db init' to create the schema."


def _check_connection(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))  # pragma: no mutate


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
def init() -> None:
    """Create the users table if it does not exist."""
    engine = get_container().engine
    try:
        _check_connection(engine)
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e

    if schema_initialized(engine):
        success("Schema already initialized.")
        return
    create_schema(engine)
    success("Schema initialized!")


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    engine = get_container().engine
    try:
        _check_connection(engine)
    except OperationalError as e:
        error("Cannot connect to database")
        click.echo(str(e))
        return

    success("Database reachable")
    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(str(engine.url))}")
    if schema_initialized(engine):
        click.echo("Schema  : initialized")
    else:
        click.echo("Schema  : uninitialized")
        warn(INIT_SCHEMA_INSTRUCTIONS)
