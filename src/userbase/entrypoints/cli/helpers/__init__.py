"""CLI helpers for USERBASE.

URL sanitization for safe display, parsing of logger-level options, and
stderr message emitters with emoji→ASCII fallbacks.
"""

from .db_url import sanitize_url
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "parse_log_level", "sanitize_url", "success", "warn"]
