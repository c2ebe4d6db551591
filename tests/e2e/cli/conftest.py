"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits representative log
messages, a CliRunner, an isolated filesystem per test, and environments
pointing USERBASE at a throwaway SQLite database.
"""

import json
import logging

import click
import pytest
from click.testing import CliRunner

from userbase.adapters.db import create_schema
from userbase.adapters.db.engine import make_engine
from userbase.entrypoints.cli.main import userbase

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit DEBUG..CRITICAL on 'userbase.demo' and some third-party noise."""
    logger = logging.getLogger("userbase.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level group for one test."""
    userbase.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(userbase, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def bare_db_env(sqlite_url_file):
    """Environment pointing at an empty SQLite file (no schema yet)."""
    return {"USERBASE_DB_URL": sqlite_url_file, "USERBASE_ID_GENERATOR": None}


@pytest.fixture
def db_env(bare_db_env):
    """Environment pointing at a SQLite file with the schema created."""
    engine = make_engine(bare_db_env["USERBASE_DB_URL"])
    create_schema(engine)
    engine.dispose()
    return bare_db_env


@pytest.fixture
def cli(runner, db_env):
    """Invoke ``userbase`` with the flight recorder off and `db_env` set.

    Returns the Click `Result`; extra keyword arguments go to `invoke`.
    """

    def _invoke(*args: str, env: dict | None = None):
        return runner.invoke(
            userbase,
            ["--no-flight-recorder", *args],
            env={**db_env, **(env or {})},
        )

    return _invoke


@pytest.fixture
def cli_json(cli):
    """Like `cli`, but asserts success and decodes stdout as JSON."""

    def _invoke(*args: str):
        result = cli(*args)
        assert result.exit_code == 0, result.output
        return json.loads(result.stdout)

    return _invoke
