"""``pyutils demo``: a guided tour of the library.

Runs each helper on a small, fixed input and prints the result on stdout,
in the same order the helpers are documented: console, parsing, ranges,
sequences, strings, and a file round trip.

The greeting name is taken from ``--name`` or read from stdin, and the file
round trip writes to ``--file`` (``pyutils-demo.txt`` in the current
directory by default).
"""

import logging
from pathlib import Path

import click

from pyutils import sequences as seq
from pyutils import strings
from pyutils.console import input, print  # pylint: disable=redefined-builtin
from pyutils.files import read_entire_file, write_text_file
from pyutils.parsing import to_double, to_int
from pyutils.ranges import Range

from .helpers import error, success

logger = logging.getLogger(__name__)

DEFAULT_DEMO_FILE = "pyutils-demo.txt"  # pragma: no mutate
FILE_CONTENT = "Hello, File!"  # pragma: no mutate


def _console(name: str | None) -> None:
    print("Hello, World!")
    if name is None:
        name = input("Enter your name: ")
    print("Hello, " + name + "!")
    print("This", "is", "a", "test")
    print("String representation of number: " + strings.to_str(123))


def _parsing() -> None:
    if (int_value := to_int("42")) is not None:
        print("Converted to int:", int_value)
    if (double_value := to_double("3.14")) is not None:
        print("Converted to double:", double_value)
    print("Length of 'Hello':", seq.len("Hello"))


def _sequences() -> None:
    print("Range from 0 to 4:", strings.join(seq.map(strings.to_str, Range(5)), " "))

    print("Enumerate example:")
    for idx, val in seq.enumerate(["apple", "banana", "cherry"]):
        print(f"Index: {idx}, Value: {val}")

    print("Zip example:")
    for n, c in seq.zip([1, 2, 3], ["a", "b", "c"]):
        print(f"Num: {n}, Char: {c}")

    print("Map (squared):", seq.map(lambda x: x * x, [1, 2, 3, 4]))
    print("Filter (x > 2):", seq.filter(lambda x: x > 2, [1, 2, 3, 4]))
    print("Sum of [1,2,3,4]:", seq.sum([1, 2, 3, 4]))
    numbers = [1, 5, 3, 9, 2]
    print(f"Max: {seq.max(numbers)}, Min: {seq.min(numbers)}")
    print("Reversed list:", seq.reversed([1, 2, 3, 4]))


def _strings() -> None:
    print("Joined: " + strings.join(["Hello", "World"], " "))
    print("Split result:", strings.split("Hello World Test", " "))
    print("Starts with 'Hello':", strings.startswith("Hello World", "Hello"))
    print("Ends with 'World':", strings.endswith("Hello World", "World"))
    print("Stripped: '" + strings.strip("   Hello World   ") + "'")
    print("LStripped: '" + strings.lstrip("   Hello   ") + "'")
    print("RStripped: '" + strings.rstrip("   Hello   ") + "'")
    print("Is '12345' all digits?", strings.isdigit_all("12345"))
    print("Is 'abcdef' all alphabets?", strings.isalpha_all("abcdef"))


def _files(path: Path) -> bool:
    if not write_text_file(path, FILE_CONTENT):
        error(f"Cannot write {path}")
        return False
    content = read_entire_file(path)
    if content is None:
        error(f"Cannot read {path}")
        return False
    print("File content: " + content)
    return True


@click.command(name="demo")
@click.option(
    "--name",
    default=None,
    help="Name to greet. Read from stdin when omitted.",
)
@click.option(
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_DEMO_FILE,
    show_default=True,
    help="File used for the write/read round trip.",
)
def demo(name: str | None, file_path: Path) -> None:
    """Walk through the pyutils helpers."""
    logger.info("Running demo (file=%s)", file_path)
    _console(name)
    _parsing()
    _sequences()
    _strings()
    if not _files(file_path):
        raise click.exceptions.Exit(1)
    success("Demo complete!")
