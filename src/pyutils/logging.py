"""Logging setup for the ``pyutils`` command.

Library modules only ever call ``logging.getLogger(__name__)``. Handlers are
installed once, by :func:`configure`, when the command starts:

- a Rich console handler on stderr, whose threshold follows ``-v``/``-q``;
- a *flight recorder*: a :class:`~logging.handlers.MemoryHandler` that keeps
  the latest records at DEBUG granularity and writes them to a file when a
  WARNING arrives, or on exit when asked to.

Console lines are tagged with where a record comes from (see :func:`origin`),
so ``pyutils.files`` records read ``files: ...`` and records from other
packages read ``[urllib3] ...``.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from pyutils import __version__, config
from pyutils.mappings import join_map
from pyutils.strings import join

PROJECT_PREFIX = "pyutils"

CONSOLE_FORMAT = "%(origin)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d (pid %(process)d) %(message)s"
)

# Versions reported at startup, by distribution name.
STACK = ("click", "click-extra", "rich", "platformdirs")


def origin(logger_name: str) -> str:
    """Return the console tag for records of ``logger_name``.

    Examples:
        ```py
        origin("pyutils")                      # ""
        origin("pyutils.files")                # "files:"
        origin("pyutils.entrypoints.cli.demo") # "demo:"
        origin("click_extra.colorize")         # "[click_extra]"
        ```
    """
    package, _, _ = logger_name.partition(".")
    if package != PROJECT_PREFIX:
        return f"[{package}]"
    if logger_name == PROJECT_PREFIX:
        return ""
    return logger_name.rpartition(".")[2] + ":"


class OriginFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Store :func:`origin` on each record as ``record.origin``; drops nothing."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.origin = origin(record.name)
        return True


def console_level(verbose: int, quiet: int) -> int:
    """Map ``-v``/``-q`` counts to a level, one step each way from WARNING."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True)
class LoggingSetup:
    """Logging choices taken from the command line.

    Attributes:
        level: Console threshold; ignored in debug mode.
        debug: Show every record with time, logger name and source location.
        color: Let Rich pick a color system; False disables color.
        log_path: Flight-recorder file, or None to run without a recorder.
        capacity: Number of records the recorder keeps in memory.
        flush_on_close: Write the recorder buffer on exit, warning or not.
        logger_levels: Per-logger minimum levels, applied to every handler.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = config.FLIGHT_RECORDER_CAPACITY
    flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)


def console_handler(
    level: int = logging.WARNING, *, debug: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr handler.

    Args:
        level: Minimum level shown; debug mode always shows DEBUG.
        debug: Replace the origin tag with time, logger name and file:line.
        color: False turns Rich's color system off (``--no-color``).

    Returns:
        RichHandler: The handler, ready to attach to the root logger.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug,
        enable_link_path=debug,
    )
    if debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(OriginFilter())
    return handler


def flight_recorder(
    path: Path,
    capacity: int = config.FLIGHT_RECORDER_CAPACITY,
    *,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory recorder backed by ``path``.

    The buffer is written when a WARNING (or worse) arrives, when it holds
    ``capacity`` records, and on close if ``flush_on_close`` is set. The file
    is truncated and opened on the first write only.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure(setup: LoggingSetup) -> list[logging.Handler]:
    """Install the handlers described by ``setup`` on the root logger.

    Replaces any handlers already installed. Returns the new handlers.
    """
    handlers: list[logging.Handler] = [
        console_handler(setup.level, debug=setup.debug, color=setup.color)
    ]
    if setup.log_path is not None:
        handlers.append(
            flight_recorder(
                setup.log_path, setup.capacity, flush_on_close=setup.flush_on_close
            )
        )
    # the root passes everything; handlers and logger levels do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in setup.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger, setup: LoggingSetup, handlers: list[logging.Handler]
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics.

    The diagnostics cover the interpreter, the library stack, the installed
    handlers, the recorder, per-logger levels and the library defaults that
    shape parsing and stripping.
    """
    logger.info(
        "pyutils %s started (console=%s, flight recorder=%s)",
        __version__,
        "DEBUG" if setup.debug else logging.getLevelName(setup.level),
        setup.log_path if setup.log_path is not None else "off",
    )
    logger.debug(
        "Python %s on %s %s (pid %d, cwd %s)",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
        Path.cwd(),
    )
    logger.debug("Stack: %s", join_map({name: version(name) for name in STACK}))
    logger.debug("Handlers: %s", join([type(h).__name__ for h in handlers], ", "))
    if setup.log_path is not None:
        logger.debug(
            "Flight recorder: capacity=%d, flush on exit=%s",
            setup.capacity,
            "yes" if setup.flush_on_close else "no",
        )
    logger.debug(
        "Logger levels: %s",
        join_map(
            {name: logging.getLevelName(lvl) for name, lvl in setup.logger_levels.items()}
        )
        or "<none>",
    )
    logger.debug(
        "Library defaults: strip=%r, int range=[%d, %d], true=%s, false=%s",
        config.DEFAULT_STRIP_CHARS,
        config.INT_MIN,
        config.INT_MAX,
        join(sorted(config.TRUE_LITERALS), "/"),
        join(sorted(config.FALSE_LITERALS), "/"),
    )
