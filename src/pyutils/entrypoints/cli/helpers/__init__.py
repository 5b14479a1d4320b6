"""CLI helpers for pyutils.

Utilities used by the command-line interface: the NAME=LEVEL logger-level
callback and message emitters that write to stderr with emoji-to-ASCII
fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["parse_log_level", "warn", "success", "error"]
