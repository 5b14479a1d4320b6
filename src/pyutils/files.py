"""Whole-file text helpers.

Files are read and written in one piece. No newline translation takes place
and bytes that are not valid UTF-8 are carried through with the
``surrogateescape`` error handler, so ``read_entire_file`` followed by
``write_text_file`` reproduces the original bytes.

Failures are reported by return value (``None``/``False``) and logged at
DEBUG level; nothing is raised for an unreadable or unwritable path.
"""

import logging
import os
from pathlib import Path

__all__ = ["read_entire_file", "write_text_file", "file_exists"]

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]

ENCODING = "utf-8"  # pragma: no mutate
ERRORS = "surrogateescape"  # pragma: no mutate


def read_entire_file(path: PathLike) -> str | None:
    """Return the full content of the file at ``path``.

    Args:
        path: File to read.

    Returns:
        The file content, or ``None`` if the file cannot be opened or read.
    """
    try:
        with open(path, encoding=ENCODING, errors=ERRORS, newline="") as fp:
            content = fp.read()
    except (OSError, ValueError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
    logger.debug("Read %d characters from %s", len(content), path)
    return content


def write_text_file(path: PathLike, content: str) -> bool:
    """Create or truncate the file at ``path`` and write ``content`` to it.

    Args:
        path: File to write.
        content: Text to store.

    Returns:
        True on success, False if the file cannot be opened or written, or if
        ``content`` holds characters UTF-8 cannot carry (lone surrogates other
        than the ones ``read_entire_file`` produces). In that last case the
        file is not touched.
    """
    try:
        data = content.encode(ENCODING, ERRORS)
    except UnicodeEncodeError as exc:
        logger.debug("Cannot encode content for %s: %s", path, exc)
        return False
    try:
        with open(path, "wb") as fp:
            fp.write(data)
    except (OSError, ValueError) as exc:
        logger.debug("Cannot write %s: %s", path, exc)
        return False
    logger.debug("Wrote %d characters to %s", len(content), path)
    return True


def file_exists(path: PathLike) -> bool:
    """Return True if ``path`` names an existing file or directory."""
    return Path(path).exists()
