"""Terminal message helpers for the pyutils CLI.

Status lines go to **stderr** so stdout only carries command results (for
example the value printed by ``pyutils parse``). Each line starts with a glyph
that falls back to ASCII when stderr cannot encode the emoji.
"""

from typing import Literal

import click

Kind = Literal["warn", "success", "error"]

# kind -> (emoji, ASCII fallback, color)
_STYLES: dict[Kind, tuple[str, str, str]] = {
    "warn": ("⚠️", "[!]", "yellow"),  # pragma: no mutate
    "success": ("✅", "[OK]", "green"),  # pragma: no mutate
    "error": ("❌", "[X]", "red"),  # pragma: no mutate
}


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to check (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: Kind) -> str:
    """Return the marker for *kind*, emoji when stderr supports it, ASCII otherwise."""
    emoji, fallback, _ = _STYLES[kind]
    return emoji if _supports_character(emoji) else fallback


def _emit(kind: Kind, msg: str) -> None:
    color = _STYLES[kind][2]
    click.secho(f"{glyph(kind)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    _emit("success", msg)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**."""
    _emit("error", msg)
