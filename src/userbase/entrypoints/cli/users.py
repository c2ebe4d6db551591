"""USERBASE users CLI - the four user operations.

Results are written to stdout as JSON:

    $ userbase users create "Ada Lovelace"
    {"result": true}
    $ userbase users list
    [{"id": "6f1c...", "full_name": "Ada Lovelace"}]

An invalid name is a usage error (exit status 2). A duplicate name or an
unknown id exits with status 1 and the failure message. Storage failures have
already been logged by the service; they exit with status 1 and a short hint.
"""

from __future__ import annotations

import dataclasses
import json
from typing import TYPE_CHECKING, Any

import click
import click_extra as clickx
from sqlalchemy.exc import SQLAlchemyError

from userbase.service_layer import CreateUserRequest, FailureKind, UserServiceError

from .container import get_container

if TYPE_CHECKING:
    from collections.abc import Callable

    from userbase.service_layer import UserService

STORAGE_FAILURE_MSG = (
    "The database rejected the operation (see the log for details).\n"
    "If the schema is missing, run 'userbase db init'."
)


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload))


def _run(operation: Callable[[UserService], Any]) -> Any:
    """Call `operation` with the user service, translating failures for Click."""
    service = get_container().user_service
    try:
        return operation(service)
    except UserServiceError as err:
        match err.kind:
            case FailureKind.VALIDATION:
                raise click.BadParameter(str(err), param_hint="FULL_NAME") from err
            case _:
                raise click.ClickException(str(err)) from err
    except SQLAlchemyError as err:
        raise click.ClickException(STORAGE_FAILURE_MSG) from err


@click.group(cls=clickx.ExtraGroup)
def users() -> None:
    """User management commands."""


@users.command(name="list")
def list_users() -> None:
    """List all users."""
    found = _run(lambda service: service.list_all())
    _echo_json([dataclasses.asdict(user) for user in found])


@users.command()
@click.argument("user_id")
def get(user_id: str) -> None:
    """Show the user with USER_ID (prints null if there is none)."""
    user = _run(lambda service: service.get_by_id(user_id))
    _echo_json(dataclasses.asdict(user) if user is not None else None)


@users.command()
@click.argument("full_name")
def create(full_name: str) -> None:
    """Create a user named FULL_NAME."""
    result = _run(lambda service: service.create(CreateUserRequest(full_name)))
    _echo_json({"result": result})


@users.command()
@click.argument("user_id")
def delete(user_id: str) -> None:
    """Delete the user with USER_ID."""
    result = _run(lambda service: service.delete_by_id(user_id))
    _echo_json({"result": result})
