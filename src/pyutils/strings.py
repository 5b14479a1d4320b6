"""String helpers.

Whole-string predicates and transforms. Character classes and case mapping
are ASCII-only: characters outside the ASCII range are never classified as
digits, letters or whitespace, and are left untouched by ``lower``/``upper``.

All functions return new strings (or lists of strings); inputs are never
modified.
"""

# pylint: disable=redefined-builtin

import string
from collections.abc import Iterable
from typing import Any

from pyutils.config import DEFAULT_STRIP_CHARS

__all__ = [
    "to_str",
    "join",
    "split",
    "startswith",
    "endswith",
    "strip",
    "lstrip",
    "rstrip",
    "replace",
    "replace_all",
    "lower",
    "upper",
    "isdigit_all",
    "isalpha_all",
    "isalnum_all",
    "isspace_all",
]

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters)
_ALNUM = _DIGITS | _ALPHA
_SPACE = frozenset(" \t\n\v\f\r")

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_str(value: Any) -> str:
    """Return the string form of ``value`` (strings are returned as-is)."""
    if isinstance(value, str):
        return value
    return str(value)


def join(parts: Iterable[str], sep: str = "") -> str:
    """Concatenate ``parts`` with ``sep`` between consecutive elements.

    Args:
        parts: Strings to join.
        sep: Separator placed between elements, never before or after.

    Returns:
        The joined string; ``""`` when ``parts`` is empty.
    """
    return sep.join(parts)


def split(s: str, delim: str = " ") -> list[str]:
    """Split ``s`` on every occurrence of a single-character delimiter.

    Consecutive delimiters produce empty elements (no collapsing) and a
    trailing delimiter produces a trailing empty element. The empty string
    splits into an empty list.

    Args:
        s: The string to split.
        delim: Exactly one character.

    Returns:
        The pieces of ``s`` between delimiters.

    Raises:
        ValueError: If ``delim`` is not exactly one character.

    Examples:
        ```py
        split("a,,b", ",")   # ["a", "", "b"]
        split("a,b,", ",")   # ["a", "b", ""]
        split("", ",")       # []
        ```
    """
    if len(delim) != 1:
        raise ValueError(f"delimiter must be a single character, got {delim!r}")
    if not s:
        return []
    return s.split(delim)


def startswith(s: str, prefix: str) -> bool:
    """Return True if ``prefix`` is a prefix of ``s`` (always True for ``""``)."""
    return s.startswith(prefix)


def endswith(s: str, suffix: str) -> bool:
    """Return True if ``suffix`` is a suffix of ``s`` (always True for ``""``)."""
    return s.endswith(suffix)


def strip(s: str, chars: str = DEFAULT_STRIP_CHARS) -> str:
    """Remove leading and trailing runs of characters found in ``chars``."""
    return s.strip(chars)


def lstrip(s: str, chars: str = DEFAULT_STRIP_CHARS) -> str:
    """Remove the leading run of characters found in ``chars``."""
    return s.lstrip(chars)


def rstrip(s: str, chars: str = DEFAULT_STRIP_CHARS) -> str:
    """Remove the trailing run of characters found in ``chars``."""
    return s.rstrip(chars)


def replace(s: str, old: str, new: str, all: bool = True) -> str:
    """Substitute ``new`` for ``old`` in ``s``, left to right, without overlaps.

    Args:
        s: The source string.
        old: The substring to look for. When empty, ``s`` is returned unchanged.
        new: The replacement text. It is never rescanned.
        all: Replace every occurrence when True, only the first otherwise.

    Returns:
        The string with substitutions applied.
    """
    if not old:
        return s
    if all:
        return s.replace(old, new)
    return s.replace(old, new, 1)


def replace_all(s: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` with ``new``; see :func:`replace`."""
    return replace(s, old, new, all=True)


def lower(s: str) -> str:
    """Map ASCII ``A-Z`` to ``a-z``; other characters are unchanged."""
    return s.translate(_TO_LOWER)


def upper(s: str) -> str:
    """Map ASCII ``a-z`` to ``A-Z``; other characters are unchanged."""
    return s.translate(_TO_UPPER)


def _all_in(s: str, allowed: frozenset[str]) -> bool:
    # The empty string is rejected on purpose: no vacuous truth.
    return bool(s) and set(s) <= allowed


def isdigit_all(s: str) -> bool:
    """Return True if ``s`` is non-empty and made of ASCII digits only."""
    return _all_in(s, _DIGITS)


def isalpha_all(s: str) -> bool:
    """Return True if ``s`` is non-empty and made of ASCII letters only."""
    return _all_in(s, _ALPHA)


def isalnum_all(s: str) -> bool:
    """Return True if ``s`` is non-empty and made of ASCII letters and digits only."""
    return _all_in(s, _ALNUM)


def isspace_all(s: str) -> bool:
    """Return True if ``s`` is non-empty and made of ASCII whitespace only.

    Whitespace is the C locale set: space, ``\\t``, ``\\n``, ``\\v``, ``\\f``
    and ``\\r``.
    """
    return _all_in(s, _SPACE)
