"""Strict text-to-value conversions.

Each parser either consumes the *whole* input and returns a value, or returns
``None``. Partial parses (``"42a"``), trailing whitespace (``"42 "``) and
out-of-range values are all reported as ``None``; nothing is raised.

Leading whitespace and a single sign are accepted, following the C
``strtoll``/``strtod`` convention. Python-only literal forms such as digit
group underscores (``"1_000"``) or non-ASCII digits are rejected.

Examples:
    ```py
    to_int("42")        # 42
    to_int("ff", 16)    # 255
    to_int("42a")       # None
    to_double("1e3")    # 1000.0
    to_bool("Yes")      # True
    ```
"""

import math
import re
import sys

from pyutils.config import FALSE_LITERALS, INT_MAX, INT_MIN, TRUE_LITERALS
from pyutils.strings import lower

__all__ = ["to_int", "to_double", "to_bool"]

_LEADING_WS = r"[ \t\n\v\f\r]*"

_INT_LITERAL = re.compile(_LEADING_WS + r"(?P<sign>[+-]?)(?P<body>[0-9A-Za-z]+)")

_DECIMAL_FLOAT = re.compile(
    _LEADING_WS
    + r"(?P<literal>[+-]?(?P<mantissa>[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)
_HEX_FLOAT = re.compile(
    _LEADING_WS
    + r"(?P<literal>[+-]?0[xX]"
    + r"(?P<mantissa>[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)"
    + r"(?:[pP][+-]?[0-9]+)?)"
)
_SPECIAL_FLOAT = re.compile(
    _LEADING_WS + r"(?P<literal>[+-]?(?:inf|infinity|nan))", re.IGNORECASE
)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _digit_value(char: str) -> int:
    # char is a single ASCII alphanumeric, guaranteed by _INT_LITERAL
    return int(char, 36)


def _split_base_prefix(body: str, base: int) -> tuple[int, str]:
    """Resolve the effective base and strip any radix prefix from ``body``.

    Base 16 accepts an optional ``0x``/``0X`` prefix. Base 0 auto-detects:
    ``0x`` selects hexadecimal, a leading ``0`` octal, anything else decimal.
    A prefix only counts when a valid digit follows it.
    """
    if (
        base in (0, 16)
        and len(body) > 2
        and body[:2] in ("0x", "0X")
        and body[2] in _HEX_DIGITS
    ):
        return 16, body[2:]
    if base == 0:
        if len(body) > 1 and body[0] == "0":
            return 8, body[1:]
        return 10, body
    return base, body


def to_int(text: str, base: int = 10) -> int | None:
    """Parse ``text`` as an integer in ``base``.

    Args:
        text: The text to parse. Leading whitespace and one ``+``/``-`` sign
            are accepted; anything after the digits makes the parse fail.
        base: 0 (auto-detect) or 2..36.

    Returns:
        The parsed value, or ``None`` if the text is not entirely a valid
        integer, the base is unsupported, or the value does not fit in a
        signed 64-bit integer.
    """
    if base != 0 and not 2 <= base <= 36:
        return None
    if (match := _INT_LITERAL.fullmatch(text)) is None:
        return None

    radix, digits = _split_base_prefix(match.group("body"), base)
    if any(_digit_value(char) >= radix for char in digits):
        return None

    value = int(digits, radix)
    if match.group("sign") == "-":
        value = -value
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def to_double(text: str) -> float | None:
    """Parse ``text`` as a floating-point number.

    Accepts decimal literals with optional fraction and exponent
    (``"3.14"``, ``".5"``, ``"1e-3"``), hexadecimal floats (``"0x1.8p3"``)
    and the case-insensitive words ``inf``, ``infinity`` and ``nan``.

    A finite literal that overflows to infinity, or a non-zero literal whose
    value falls below the smallest normal double (``sys.float_info.min``,
    about ``2.2e-308``), is out of range and yields ``None``.

    Args:
        text: The text to parse.

    Returns:
        The parsed value, or ``None`` if the text is not entirely a valid
        literal or the value is out of range.
    """
    if (match := _SPECIAL_FLOAT.fullmatch(text)) is not None:
        return float(match.group("literal"))

    if (match := _HEX_FLOAT.fullmatch(text)) is not None:
        try:
            value = float.fromhex(match.group("literal"))
        except OverflowError:
            return None
        significant = any(char not in "0." for char in match.group("mantissa"))
    elif (match := _DECIMAL_FLOAT.fullmatch(text)) is not None:
        value = float(match.group("literal"))
        significant = any(char not in "0." for char in match.group("mantissa"))
    else:
        return None

    # strtod reports ERANGE for zero and subnormal results of non-zero literals
    if math.isinf(value) or (significant and abs(value) < sys.float_info.min):
        return None
    return value


def to_bool(text: str) -> bool | None:
    """Parse ``text`` as a boolean word.

    ``true``/``1``/``yes``/``y`` map to ``True`` and ``false``/``0``/``no``/``n``
    to ``False``, compared ASCII case-insensitively. Surrounding whitespace is
    not trimmed.
    """
    word = lower(text)
    if word in TRUE_LITERALS:
        return True
    if word in FALSE_LITERALS:
        return False
    return None
