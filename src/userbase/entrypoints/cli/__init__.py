"""USERBASE command-line interface."""

from .main import userbase

__all__ = ["userbase"]
