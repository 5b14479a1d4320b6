"""Fixtures for end-to-end tests of the ``pyutils`` command.

Besides a CliRunner and an isolated working directory, this module provides a
test-only ``log-demo`` subcommand that logs one line per level from a project
logger and a third-party logger, so verbosity flags, ``-L`` overrides and the
flight recorder can be observed from the outside.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from pyutils.entrypoints.cli.main import pyutils

# pylint: disable=redefined-outer-name

LOG_DEMO = "log-demo"


@click.command(name=LOG_DEMO)
def log_demo():
    """Log a fixed sequence of records on 'pyutils.e2e' and 'vendor.lib'."""
    own = logging.getLogger("pyutils.e2e")
    vendor = logging.getLogger("vendor.lib")
    own.debug("own debug record")
    own.info("own info record")
    vendor.debug("vendor debug record")
    vendor.info("vendor info record")
    own.warning("own warning record")
    own.error("own error record")
    own.critical("own critical record")
    own.debug("late debug record")


@pytest.fixture
def with_log_demo():
    """Attach ``log-demo`` to the top-level group for one test."""
    pyutils.add_command(log_demo)
    try:
        yield LOG_DEMO
    finally:
        pyutils.commands.pop(LOG_DEMO, None)
        # click-extra keeps its own per-section registry of subcommands
        for section in getattr(pyutils, "_sections", []):
            getattr(section, "commands", {}).pop(LOG_DEMO, None)
        default_section = getattr(pyutils, "_default_section", None)
        if default_section is not None:
            default_section.commands.pop(LOG_DEMO, None)


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a fresh temporary working directory."""
    with runner.isolated_filesystem() as path:
        yield path
