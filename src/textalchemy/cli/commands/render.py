# topmark:header:start
#
#   project      : TextAlchemy
#   file         : render.py
#   file_relpath : src/textalchemy/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy `render` command.

Renders a JSON document (file or STDIN) with the depth-bounded tree renderer.
Input that is not JSON is rendered as a single string leaf. HTML output can be
wrapped in a page template with ``--wrap``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textalchemy.cli.cli_types import DepthParam, EnumChoiceParam
from textalchemy.cli.cmd_common import (
    STDIN_ARG,
    get_console,
    get_settings,
    library_errors,
    read_source,
)
from textalchemy.cli.errors import TextAlchemyUsageError
from textalchemy.cli.options import explicit_value
from textalchemy.config.logging import get_logger
from textalchemy.core.formats import RenderFormat
from textalchemy.decoding.leaves import decode_leaves
from textalchemy.io.loader import parse_json_or_text
from textalchemy.rendering.tree import RenderConfig, render
from textalchemy.templates import prepare_html_output
from textalchemy.templates.types import Audience, TemplateStyle

if TYPE_CHECKING:
    from textalchemy.config.logging import TextAlchemyLogger
    from textalchemy.core.values import Depth

logger: TextAlchemyLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render a JSON document as html, markdown, text-table or pruned json.",
)
@click.argument("source", metavar="[FILE|-]", default=STDIN_ARG)
@click.option(
    "--format",
    "render_format",
    type=EnumChoiceParam(RenderFormat),
    default=None,
    help=f"Output encoding ({', '.join(f.value for f in RenderFormat)}; default html).",
)
@click.option(
    "--depth",
    type=DepthParam(),
    default=None,
    help="Levels of nesting to expand (default: all).",
)
@click.option(
    "--decode-base64",
    is_flag=True,
    help="Decode canonical Base64 string leaves before rendering.",
)
@click.option(
    "--recursive-json",
    is_flag=True,
    help="Expand decoded leaves that contain JSON (with --decode-base64).",
)
@click.option(
    "--wrap",
    "wrap_page",
    is_flag=True,
    help="Wrap html output in a complete page.",
)
@click.option(
    "--template",
    type=EnumChoiceParam(TemplateStyle),
    default=None,
    help=f"Page template for --wrap ({', '.join(t.value for t in TemplateStyle)}).",
)
@click.option(
    "--audience",
    type=EnumChoiceParam(Audience),
    default=None,
    help=f"Page layout for --wrap ({', '.join(a.value for a in Audience)}).",
)
@click.option("--title", default=None, help="Page title for --wrap.")
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    source: str,
    render_format: RenderFormat | None,
    depth: Depth | None,
    decode_base64: bool,
    recursive_json: bool,
    wrap_page: bool,
    template: TemplateStyle | None,
    audience: Audience | None,
    title: str | None,
) -> None:
    """Render a JSON document and print the result."""
    console = get_console(ctx)
    settings = get_settings(ctx).merged(
        render_format=render_format,
        render_depth=depth,
        template=template,
        audience=audience,
        title=title,
        decode_base64=explicit_value(ctx, "decode_base64", decode_base64),
        recursive_json=explicit_value(ctx, "recursive_json", recursive_json),
    )

    if wrap_page and settings.render_format is not RenderFormat.HTML:
        raise TextAlchemyUsageError(
            f"--wrap only applies to html output, not {settings.render_format.value}."
        )

    name, text = read_source(source)
    value = parse_json_or_text(text)
    logger.info("Rendering %s as %s", name, settings.render_format.value)

    with library_errors():
        if settings.decode_base64:
            value = decode_leaves(value, settings.render_depth, settings.recursive_json)
        output = render(
            value, RenderConfig(format=settings.render_format, depth=settings.render_depth)
        )

    if wrap_page:
        output = prepare_html_output(
            output,
            template=settings.template,
            title=settings.title,
            audience=settings.audience,
        )
    console.print(output)
