"""Bootstrap (composition root) for USERBASE.

Assembles the application at runtime: reads configuration, builds the
concrete adapters (engine, repository, logger, id generator) and wires them
into a `UserService`.

Import rules:
- Entry points get their wired objects from *this* package; they never
  build repositories, loggers or id generators themselves.
- This package may import every other `userbase` package.
- Inner layers must not import `userbase.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
