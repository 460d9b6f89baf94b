# topmark:header:start
#
#   project      : TextAlchemy
#   file         : html.py
#   file_relpath : src/textalchemy/cli/commands/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy `html` command.

Turns a short text into a complete HTML page: the text is escaped, styled
inline, placed in a text block (or a quote block) and wrapped in one of the
page templates.
"""

from __future__ import annotations

import click

from textalchemy.cli.cli_types import EnumChoiceParam
from textalchemy.cli.cmd_common import collect_text, get_console, get_settings
from textalchemy.cli.options import inline_style_options
from textalchemy.templates import wrap
from textalchemy.templates.document import create_quote_block, create_text_block, format_inline_html
from textalchemy.templates.types import Audience, TemplateStyle


@click.command(
    name="html",
    help="Generate an HTML page around TEXT (reads STDIN when TEXT is omitted).",
)
@click.argument("words", metavar="[TEXT]...", nargs=-1)
@click.option("--title", default=None, help="Page title (default from config).")
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
@click.option("--quote", is_flag=True, help="Present TEXT as a quote block.")
@click.option("--author", default=None, help="Quote author (implies --quote).")
@inline_style_options
@click.pass_context
def html_command(
    ctx: click.Context,
    *,
    words: tuple[str, ...],
    title: str | None,
    template: TemplateStyle | None,
    audience: Audience | None,
    quote: bool,
    author: str | None,
    bold: bool,
    italic: bool,
    text_color: str | None,
) -> None:
    """Generate an HTML page and print it."""
    console = get_console(ctx)
    settings = get_settings(ctx).merged(
        title=title,
        template=template,
        audience=audience,
    )
    text = format_inline_html(collect_text(words), bold=bold, italic=italic, color=text_color)

    if quote or author:
        block = create_quote_block(text, author)
    else:
        block = create_text_block(text)

    console.print(
        wrap(block, title=settings.title, style=settings.template, audience=settings.audience)
    )
