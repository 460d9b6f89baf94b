# topmark:header:start
#
#   project      : TextAlchemy
#   file         : parse.py
#   file_relpath : src/textalchemy/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy `parse` command.

Prints a JSON document (file or STDIN) as indented ``key: value`` lines,
optionally decoding Base64 string leaves and expanding the JSON they carry.
Unlike `render`, the input must be valid JSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textalchemy.cli.cli_types import AUTO_DEPTH, DepthParam
from textalchemy.cli.cmd_common import (
    STDIN_ARG,
    get_console,
    get_settings,
    library_errors,
    read_source,
)
from textalchemy.cli.options import explicit_value
from textalchemy.config.logging import get_logger
from textalchemy.decoding.indented import format_indented, format_indented_auto
from textalchemy.io.loader import parse_json

if TYPE_CHECKING:
    from textalchemy.config.logging import TextAlchemyLogger
    from textalchemy.core.values import Depth

logger: TextAlchemyLogger = get_logger(__name__)


@click.command(
    name="parse",
    help="Print a JSON document as indented 'key: value' lines.",
)
@click.argument("source", metavar="FILE|-")
@click.option(
    "--depth",
    type=DepthParam(allow_auto=True),
    default=None,
    help="Levels of nesting to print, or 'auto' for the whole document (default: 3).",
)
@click.option("--indent", default=None, help="Indent unit per level (default: three spaces).")
@click.option(
    "--decode-base64",
    is_flag=True,
    help="Decode canonical Base64 string leaves.",
)
@click.option(
    "--recursive-json",
    is_flag=True,
    help="Expand decoded leaves that contain JSON (with --decode-base64).",
)
@click.pass_context
def parse_command(
    ctx: click.Context,
    *,
    source: str,
    depth: Depth | str | None,
    indent: str | None,
    decode_base64: bool,
    recursive_json: bool,
) -> None:
    """Parse a JSON document and print it as indented lines."""
    console = get_console(ctx)
    auto = depth == AUTO_DEPTH
    settings = get_settings(ctx).merged(
        depth=None if auto else depth,
        indent=indent,
        decode_base64=explicit_value(ctx, "decode_base64", decode_base64),
        recursive_json=explicit_value(ctx, "recursive_json", recursive_json),
    )

    name, text = read_source(source)
    with library_errors():
        value = parse_json(text, name)
        if auto:
            output = format_indented_auto(
                value, settings.indent, settings.decode_base64, settings.recursive_json
            )
        else:
            output = format_indented(
                value,
                settings.depth,
                settings.indent,
                settings.decode_base64,
                settings.recursive_json,
            )
    logger.info("Parsed %s (%d lines)", name, output.count("\n"))
    console.print(output, nl=False)
