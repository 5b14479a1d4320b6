"""Configuration constants for pyutils.

This module centralizes the defaults shared by the library helpers and the
command-line interface.
"""

from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "pyutils"
ENV_PREFIX = "PYUTILS"

# Characters removed by strip/lstrip/rstrip when no set is given.
DEFAULT_STRIP_CHARS = " \t\n\r"

# to_int reports values outside the signed 64-bit range as overflow.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

TRUE_LITERALS = frozenset({"true", "1", "yes", "y"})
FALSE_LITERALS = frozenset({"false", "0", "no", "n"})

LOG_FILE_NAME = "latest.log"  # pragma: no mutate

# Records kept in memory by the flight recorder before it writes them out.
FLIGHT_RECORDER_CAPACITY = 2000


def env_var(name: str) -> str:
    """Return the environment variable name used for a CLI setting.

    Args:
        name: Setting name, e.g. ``"log_path"``.

    Returns:
        The prefixed, upper-cased variable name (``"PYUTILS_LOG_PATH"``).
    """
    return f"{ENV_PREFIX}_{name.upper()}"


def default_log_path(ensure_exists: bool = True) -> Path:
    """Return the default flight-recorder file path.

    Args:
        ensure_exists: Create the per-user log directory if it is missing.

    Returns:
        ``latest.log`` inside the per-user log directory reported by platformdirs.
    """
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=ensure_exists)
    return Path(log_dir) / LOG_FILE_NAME
