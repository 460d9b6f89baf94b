# topmark:header:start
#
#   project      : TextAlchemy
#   file         : quote.py
#   file_relpath : src/textalchemy/cli/commands/quote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy `quote` command: a highlighted quote on a templated HTML page."""

from __future__ import annotations

import click

from textalchemy.cli.cli_types import EnumChoiceParam
from textalchemy.cli.cmd_common import collect_text, get_console, get_settings
from textalchemy.rendering.html import escape_html
from textalchemy.templates import wrap
from textalchemy.templates.document import create_quote_block
from textalchemy.templates.types import Audience, TemplateStyle

QUOTE_TITLE = "Quote"


@click.command(
    name="quote",
    help="Create a quote page from TEXT (reads STDIN when TEXT is omitted).",
)
@click.argument("words", metavar="[TEXT]...", nargs=-1)
@click.option("--author", default=None, help="Quote author.")
@click.option("--title", default=QUOTE_TITLE, show_default=True, help="Page title.")
@click.option(
    "--template",
    type=EnumChoiceParam(TemplateStyle),
    default=None,
    help=f"Page template ({', '.join(t.value for t in TemplateStyle)}).",
)
@click.option(
    "--audience",
    type=EnumChoiceParam(Audience),
    default=None,
    help=f"Page layout ({', '.join(a.value for a in Audience)}).",
)
@click.pass_context
def quote_command(
    ctx: click.Context,
    *,
    words: tuple[str, ...],
    author: str | None,
    title: str,
    template: TemplateStyle | None,
    audience: Audience | None,
) -> None:
    """Create a quote page and print it."""
    console = get_console(ctx)
    settings = get_settings(ctx).merged(template=template, audience=audience)
    block = create_quote_block(escape_html(collect_text(words)), author)
    console.print(wrap(block, title=title, style=settings.template, audience=settings.audience))
