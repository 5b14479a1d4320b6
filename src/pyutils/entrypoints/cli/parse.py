"""``pyutils parse``: strict literal parsing from the command line.

Prints the parsed value on **stdout**. Text that is not entirely a valid
literal is reported on stderr with a non-zero exit code, so the command can
be used as a validator in shell scripts:

    $ pyutils parse int 42
    42
    $ pyutils parse int ff --base 16
    255
    $ pyutils parse bool yes
    True
    $ pyutils parse double -- -1e3
    -1000.0
"""

import logging
from collections.abc import Callable
from enum import Enum

import click

from pyutils import console
from pyutils.parsing import to_bool, to_double, to_int

from .helpers import warn

logger = logging.getLogger(__name__)


class LiteralKind(Enum):
    """Literal kinds accepted by ``pyutils parse``."""

    INT = "int"
    DOUBLE = "double"
    BOOL = "bool"


NOT_A_LITERAL_MSG = "{text!r} is not a valid {kind} literal."
BASE_IGNORED_MSG = "--base only applies to 'int'; ignoring it."


def _parser(kind: LiteralKind, base: int) -> Callable[[str], object]:
    if kind is LiteralKind.INT:
        return lambda text: to_int(text, base)
    if kind is LiteralKind.DOUBLE:
        return to_double
    return to_bool


@click.command(name="parse")
@click.argument(
    "kind", type=click.Choice([k.value for k in LiteralKind], case_sensitive=False)
)
@click.argument("text")
@click.option(
    "--base",
    type=click.IntRange(0, 36),
    default=None,
    help="Integer base: 0 (auto-detect) or 2..36. Defaults to 10.",
)
def parse(kind: str, text: str, base: int | None) -> None:
    """Parse TEXT as an int, double or bool literal."""
    literal_kind = LiteralKind(kind.lower())
    if base is not None and literal_kind is not LiteralKind.INT:
        warn(BASE_IGNORED_MSG)

    value = _parser(literal_kind, 10 if base is None else base)(text)
    logger.debug("parse %s %r -> %r", literal_kind.value, text, value)
    if value is None:
        raise click.ClickException(
            NOT_A_LITERAL_MSG.format(text=text, kind=literal_kind.value)
        )
    console.print(value)
