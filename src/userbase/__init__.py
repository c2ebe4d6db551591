"""USERBASE

A small user-management application. Its core service orchestrates user
creation, lookup and deletion over a pluggable repository, with validation,
duplicate-name detection, structured logging and timing around every
storage call.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
