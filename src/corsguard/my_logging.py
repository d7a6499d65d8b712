"""
Debug output for corsguard, switched on by the `CORSGUARD_DEBUG` environment variable.

Messages go to stderr as a single line with `key=value` context so per-request
output from the middleware stays greppable.
"""

import os
import sys
from typing import Any

_TRUTHY = ("true", "1", "yes")


def is_debug_enabled() -> bool:
    """Returns True if `CORSGUARD_DEBUG` is set to a truthy value."""
    return os.environ.get("CORSGUARD_DEBUG", "").lower() in _TRUTHY


def setup_debug_logging() -> bool:
    """
    Announces debug mode on stderr when it is enabled.

    Returns:
        True if debug mode is enabled, False otherwise.
    """
    if is_debug_enabled():
        sys.stderr.write("[CORSGUARD] Debug mode enabled\n")
        return True
    return False


def debug_log(message: str, **kwargs: Any) -> None:
    """
    Writes `[DEBUG] message key=value ...` to stderr if debug mode is enabled.

    Args:
        message: The debug message to print.
        **kwargs: Context appended to the line in the order given.
    """
    if not is_debug_enabled():
        return
    context = " ".join(f"{key}={value}" for key, value in kwargs.items())
    sys.stderr.write(f"[DEBUG] {message} {context}\n" if context else f"[DEBUG] {message}\n")
