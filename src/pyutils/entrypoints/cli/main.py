"""Top-level ``pyutils`` command.

The group only sets up logging (see :mod:`pyutils.logging`); the work is done
by its subcommands:

- ``pyutils demo``: a guided tour of the library helpers.
- ``pyutils parse``: strict int/double/bool literal parsing.

``--version``, ``--color/--no-color`` and ``--time`` come from Click-Extra.
Every logging option can also be set through a ``PYUTILS_*`` environment
variable.

Examples
    $ pyutils --version
    $ pyutils demo --name Ada
    $ pyutils -v parse int ff --base 16
    $ PYUTILS_LOGGER_LEVELS=pyutils.files=DEBUG pyutils -vv demo
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import click
import click_extra as clickx

from pyutils import __version__, config
from pyutils.logging import LoggingSetup, configure, console_level, log_startup

from .demo import demo as demo_command
from .helpers.log_level_parser import parse_log_level
from .parse import parse as parse_command

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., object])

HELP = """Small helpers familiar from scripting languages.

    Strict number/boolean parsing, integer ranges, sequence and string
    utilities, and thin console and file shims. The subcommands below
    exercise them from the shell.
    """

LOGGING_OPTIONS = [
    click.option(
        "-v",
        "--verbose",
        count=True,
        help="Show one more level on the console (-v INFO, -vv DEBUG).",
    ),
    click.option(
        "-q",
        "--quiet",
        count=True,
        help="Show one level less on the console (-q ERROR, -qq CRITICAL).",
    ),
    click.option(
        "--debug/--no-debug",
        default=False,
        help="Show every record with time, logger name and source location.",
    ),
    click.option(
        "-L",
        "--logger-level",
        "logger_levels",
        multiple=True,
        metavar="NAME=LEVEL",
        callback=parse_log_level,
        default=("click_extra=WARNING",),
        show_default=True,
        envvar=config.env_var("logger_levels"),
        show_envvar=True,
        help=(
            "Minimum level for one logger and its children, applied to the "
            "console and the flight recorder alike. Repeatable, e.g. "
            "-L pyutils.files=DEBUG; the environment variable takes a "
            "comma/space separated list."
        ),
    ),
    click.option(
        "--log-path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=config.default_log_path,
        envvar=config.env_var("log_path"),
        show_envvar=True,
        help=(
            f"Flight-recorder file. Defaults to {config.LOG_FILE_NAME} in the "
            "user log directory."
        ),
    ),
    click.option(
        "--flight-recorder/--no-flight-recorder",
        default=True,
        show_envvar=True,
        help=(
            "Keep recent records in memory at DEBUG granularity, whatever -v/-q "
            "say, and write them to --log-path when a WARNING occurs."
        ),
    ),
    click.option(
        "--flight-recorder-capacity",
        type=click.IntRange(min=1),
        default=config.FLIGHT_RECORDER_CAPACITY,
        hidden=True,
        envvar=config.env_var("flight_recorder_capacity"),
        help="Records kept in memory by the flight recorder.",
    ),
    click.option(
        "--force-flush/--no-force-flush",
        default=False,
        show_envvar=True,
        help="Also write the flight-recorder buffer on a clean exit.",
    ),
]


def logging_options(command: F) -> F:
    """Apply :data:`LOGGING_OPTIONS` so ``--help`` lists them in order."""
    for option in reversed(LOGGING_OPTIONS):
        command = option(command)
    return command


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@logging_options
@clickx.pass_context
def pyutils(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    debug: bool,
    logger_levels: dict[str, int],
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
) -> None:
    """Set up logging for the subcommand."""
    setup = LoggingSetup(
        level=console_level(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        flush_on_close=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure(setup)
    log_startup(logger, setup, handlers)
    # shutdown() flushes the recorder only when flush_on_close is set
    ctx.call_on_close(logging.shutdown)


pyutils.add_command(demo_command)
pyutils.add_command(parse_command)
