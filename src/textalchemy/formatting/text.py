# topmark:header:start
#
#   project      : TextAlchemy
#   file         : text.py
#   file_relpath : src/textalchemy/formatting/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline text styling.

`format_text` applies case conversion first and styling afterwards, so the
markers are never affected by the conversion:

1. ``camel`` then ``snake`` case conversion;
2. Markdown-style markers, innermost first: ``**bold**``, ``*italic*``,
   ``__underline__``;
3. an ANSI foreground color around the whole result.

ANSI sequences are produced with `click.style`, which always emits them; it is
up to the caller to decide whether the destination supports color.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

import click


class TextColor(str, Enum):
    """Colors accepted by `format_text`."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    PURPLE = "purple"
    CYAN = "cyan"


# Click names for the terminal colors; purple is ANSI magenta.
_CLICK_COLORS: Final[dict[TextColor, str]] = {
    TextColor.RED: "red",
    TextColor.GREEN: "green",
    TextColor.BLUE: "blue",
    TextColor.YELLOW: "yellow",
    TextColor.PURPLE: "magenta",
    TextColor.CYAN: "cyan",
}

_CAMEL_BOUNDARY = re.compile(r"[^a-zA-Z0-9]+(.)")
_SNAKE_BOUNDARY = re.compile(r"[^a-zA-Z0-9]+")


@dataclass(frozen=True)
class TextStyle:
    """Styling options for `format_text`.

    Attributes:
        bold (bool): Wrap in ``**...**``.
        italic (bool): Wrap in ``*...*``.
        underline (bool): Wrap in ``__...__``.
        color (TextColor | str | None): ANSI foreground color.
        camel (bool): Convert to camelCase.
        snake (bool): Convert to snake_case (applied after ``camel``).
    """

    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: TextColor | str | None = None
    camel: bool = False
    snake: bool = False


def to_camel_case(text: str) -> str:
    """Convert ``text`` to camelCase; runs of non-alphanumerics act as word breaks."""
    result = _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), text.lower())
    if result[:1].isupper():
        result = result[0].lower() + result[1:]
    return result


def to_snake_case(text: str) -> str:
    """Convert ``text`` to snake_case, without leading or trailing underscores."""
    return _SNAKE_BOUNDARY.sub("_", text.lower()).strip("_")


def colorize(text: str, color: TextColor | str) -> str:
    """Wrap ``text`` in the ANSI sequence for ``color``.

    Raises:
        ValueError: If ``color`` is not one of the `TextColor` values.
    """
    return click.style(text, fg=_CLICK_COLORS[TextColor(color)])


def format_text(text: str, style: TextStyle | None = None) -> str:
    """Format ``text`` with the given style.

    Args:
        text (str): The text to format.
        style (TextStyle | None): Styling options; ``None`` returns ``text`` unchanged.

    Returns:
        str: The formatted text.

    Raises:
        ValueError: If ``style.color`` is not a supported color.
    """
    if style is None:
        return text

    result = text
    if style.camel:
        result = to_camel_case(result)
    if style.snake:
        result = to_snake_case(result)

    if style.bold:
        result = f"**{result}**"
    if style.italic:
        result = f"*{result}*"
    if style.underline:
        result = f"__{result}__"

    if style.color:
        result = colorize(result, style.color)
    return result
