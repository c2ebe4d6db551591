"""Wire adapters into the user service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from userbase import config
from userbase.adapters.db.engine import make_engine
from userbase.adapters.id_generators import ULIDGenerator, UUIDv4Generator
from userbase.adapters.logger import StdlibLoggerAdapter
from userbase.adapters.user_repository import SqlAlchemyUserRepository
from userbase.service_layer.user_service import UserService

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from userbase.interfaces.id_generator import IdGenerator
    from userbase.interfaces.logger import LoggerAdapter
    from userbase.interfaces.user_repository import UserRepository

SERVICE_LOGGER_NAME = "userbase.service_layer.user_service"


@dataclass(frozen=True)
class AppContainer:
    """Everything an entrypoint needs, built once per process."""

    engine: Engine
    user_service: UserService


def build_id_generator(kind: config.IdGeneratorKind) -> IdGenerator:
    """Return the id generator for `kind`."""
    match kind:
        case config.IdGeneratorKind.ULID:
            return ULIDGenerator()
        case config.IdGeneratorKind.UUID4:
            return UUIDv4Generator()
    raise config.UnknownIdGeneratorError(str(kind))  # pragma: no cover


def build_user_service(
    repository: UserRepository,
    logger: LoggerAdapter | None = None,
    id_generator: IdGenerator | None = None,
) -> UserService:
    """Build a `UserService` with the default logger and id generator."""
    return UserService(
        repository,
        logger or StdlibLoggerAdapter(SERVICE_LOGGER_NAME),
        id_generator or UUIDv4Generator(),
    )


def bootstrap(db_url: str | None = None) -> AppContainer:
    """Build the application from configuration.

    Args:
        db_url: Database URL; read from `USERBASE_DB_URL` when omitted.

    Raises:
        config.DatabaseUrlNotSetError: If no URL is given or configured.
        config.UnknownIdGeneratorError: If `USERBASE_ID_GENERATOR` is invalid.
    """
    engine = make_engine(db_url or config.get_db_url())
    user_service = build_user_service(
        SqlAlchemyUserRepository(engine),
        id_generator=build_id_generator(config.get_id_generator_kind()),
    )
    return AppContainer(engine=engine, user_service=user_service)
