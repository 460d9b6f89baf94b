# topmark:header:start
#
#   project      : TextAlchemy
#   file         : version.py
#   file_relpath : src/textalchemy/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy `version` command.

Prints the current TextAlchemy version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging

import click

from textalchemy.cli.cli_types import EnumChoiceParam
from textalchemy.cli.cmd_common import get_console
from textalchemy.constants import TEXTALCHEMY_VERSION
from textalchemy.core.formats import OutputFormat


@click.command(
    name="version",
    help="Show the current version of TextAlchemy.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TextAlchemy.

    Args:
        ctx (click.Context): The Click context.
        output_format (OutputFormat | None): Output format (default: text).
    """
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": TEXTALCHEMY_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# TextAlchemy Version\n")
        console.print(f"**TextAlchemy version: {TEXTALCHEMY_VERSION}**")
    else:
        if ctx.obj.get("verbosity_level", logging.WARNING) < logging.WARNING:  # -v
            console.print(console.styled("TextAlchemy version:\n", bold=True, underline=True))
            console.print(f"    {console.styled(TEXTALCHEMY_VERSION, bold=True)}")
        else:
            console.print(console.styled(TEXTALCHEMY_VERSION, bold=True))
