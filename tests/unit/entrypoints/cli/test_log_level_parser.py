"""Unit tests for the ``-L/--logger-level`` callback.

The callback receives either a tuple (repeated flags) or a single string
(from ``PYUTILS_LOGGER_LEVELS``) and returns logger name -> numeric level,
seeded with the library defaults.
"""

import logging
import types

import click
import pytest

from pyutils.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)

# The callback never touches ctx/param; Click always passes them.
CTX = types.SimpleNamespace()


def test_no_value_gives_library_defaults():
    """Nothing supplied: only the click_extra default remains."""
    assert parse_log_level(CTX, None, ()) == {"click_extra": logging.WARNING}
    assert parse_log_level(CTX, None, "") == DEFAULT_LIB_LEVELS


def test_defaults_are_not_mutated():
    """Overrides go into a fresh dict each call."""
    parse_log_level(CTX, None, ("click_extra=DEBUG",))
    assert DEFAULT_LIB_LEVELS == {"click_extra": logging.WARNING}


def test_last_flag_wins():
    """Repeating a logger name keeps the last level given."""
    out = parse_log_level(
        CTX, None, ("pyutils.files=INFO", "click_extra=ERROR", "pyutils.files=DEBUG")
    )
    assert out == {"pyutils.files": logging.DEBUG, "click_extra": logging.ERROR}


@pytest.mark.parametrize(
    "value",
    [
        "pyutils=info,  urllib3=WARNING click_extra=error",
        ("pyutils=info,urllib3=WARNING", "click_extra=error"),
        ["pyutils=INFO", " urllib3=warning ", "click_extra=Error"],
    ],
)
def test_separators_and_case_are_normalized(value):
    """Commas and whitespace both separate items; level names ignore case."""
    out = parse_log_level(CTX, None, value)
    assert out["pyutils"] == logging.INFO
    assert out["urllib3"] == logging.WARNING
    assert out["click_extra"] == logging.ERROR


@pytest.mark.parametrize("item", ["pyutils", "=DEBUG", "pyutils:DEBUG"])
def test_malformed_item_raises(item):
    """Items without a NAME=LEVEL shape are rejected."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(CTX, None, (item,))


@pytest.mark.parametrize("item", ["pyutils=LOUD", "pyutils=", "pyutils=10"])
def test_unknown_level_raises(item):
    """Only standard level names are accepted."""
    with pytest.raises(click.BadParameter, match="Invalid log level"):
        parse_log_level(CTX, None, (item,))
