"""Console shims: line output and line input.

Output goes through :func:`click.echo`, which resolves ``sys.stdout`` at call
time and copes with misconfigured terminal encodings. Text is written as
given: ANSI escape sequences are kept even when the stream is not a terminal.
Both functions accept explicit streams so callers (and tests) can redirect
them.
"""

# pylint: disable=redefined-builtin

import sys
from typing import Any, TextIO

import click

from pyutils.strings import join, to_str

__all__ = ["print", "input"]


def print(*args: Any, file: TextIO | None = None) -> None:
    """Write the arguments, space-separated, followed by one newline.

    With no arguments only the newline is written.

    Args:
        *args: Values to write; each is rendered with ``str()``.
        file: Destination stream. Defaults to standard output.
    """
    # color=True keeps ANSI sequences on non-TTY streams
    click.echo(join([to_str(arg) for arg in args], " "), file=file, color=True)


def input(
    prompt: str = "",
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Show ``prompt`` and read one line.

    The prompt is written without a trailing newline, and only when it is
    non-empty. The returned line does not include its terminator. At end of
    input whatever was read is returned, which may be ``""``.

    Args:
        prompt: Text shown before reading.
        stdin: Stream to read from. Defaults to standard input.
        stdout: Stream the prompt is written to. Defaults to standard output.

    Returns:
        The line read, without the trailing newline.
    """
    if prompt:
        click.echo(prompt, file=stdout, nl=False, color=True)
    line = (stdin or sys.stdin).readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line
