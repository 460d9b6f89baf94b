# topmark:header:start
#
#   project      : TextAlchemy
#   file         : format.py
#   file_relpath : src/textalchemy/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy `format` command.

Styles a short text for the terminal. ``--capitalize``, ``--truncate`` and
``--normalize`` are alternative transformations: the first one given (in that
order) wins and the styling options are then ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textalchemy.cli.cmd_common import collect_text, get_console
from textalchemy.config.logging import get_logger
from textalchemy.formatting.text import TextColor, TextStyle, format_text
from textalchemy.formatting.utils import capitalize_words, normalize_text, truncate_text

if TYPE_CHECKING:
    from textalchemy.config.logging import TextAlchemyLogger

logger: TextAlchemyLogger = get_logger(__name__)


@click.command(
    name="format",
    help="Format TEXT with styling options (reads STDIN when TEXT is omitted).",
)
@click.argument("words", metavar="[TEXT]...", nargs=-1)
@click.option("--bold", is_flag=True, help="Wrap in **bold** markers.")
@click.option("--italic", is_flag=True, help="Wrap in *italic* markers.")
@click.option("--underline", is_flag=True, help="Wrap in __underline__ markers.")
@click.option(
    "--color",
    "text_color",
    type=click.Choice([c.value for c in TextColor]),
    default=None,
    help="ANSI text color.",
)
@click.option("--camel", is_flag=True, help="Convert to camelCase.")
@click.option("--snake", is_flag=True, help="Convert to snake_case.")
@click.option("--capitalize", is_flag=True, help="Capitalize each word.")
@click.option(
    "--truncate",
    "truncate_length",
    type=click.IntRange(min=1),
    default=None,
    metavar="N",
    help="Truncate to N characters (ending with '...').",
)
@click.option("--normalize", is_flag=True, help="Collapse whitespace runs to single spaces.")
@click.pass_context
def format_command(
    ctx: click.Context,
    *,
    words: tuple[str, ...],
    bold: bool,
    italic: bool,
    underline: bool,
    text_color: str | None,
    camel: bool,
    snake: bool,
    capitalize: bool,
    truncate_length: int | None,
    normalize: bool,
) -> None:
    """Format text and print the result."""
    console = get_console(ctx)
    text = collect_text(words)

    if capitalize:
        result = capitalize_words(text)
    elif truncate_length:
        result = truncate_text(text, truncate_length)
    elif normalize:
        result = normalize_text(text)
    else:
        style = TextStyle(
            bold=bold,
            italic=italic,
            underline=underline,
            color=text_color,
            camel=camel,
            snake=snake,
        )
        logger.debug("format: %s", style)
        result = format_text(text, style)

    console.print(result)
