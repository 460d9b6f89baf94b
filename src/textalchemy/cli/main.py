# topmark:header:start
#
#   project      : TextAlchemy
#   file         : main.py
#   file_relpath : src/textalchemy/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy command-line entry point.

Group-level options (verbosity, color, configuration) are resolved once and
placed into ``ctx.obj``; the subcommands pick up the console and the lazily
loaded settings from there via `textalchemy.cli.cmd_common`.
"""

from __future__ import annotations

import logging

import click

from textalchemy.cli.commands.email import email_command
from textalchemy.cli.commands.format import format_command
from textalchemy.cli.commands.html import html_command
from textalchemy.cli.commands.parse import parse_command
from textalchemy.cli.commands.quote import quote_command
from textalchemy.cli.commands.render import render_command
from textalchemy.cli.commands.version import version_command
from textalchemy.cli.console import ClickConsole
from textalchemy.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from textalchemy.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | str | None,
    no_color: bool,
    config_file: str | None,
    no_config: bool,
) -> None:
    """Initialize shared state (logging, color, console, config source) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_file (str | None): Explicit configuration file from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # TEXTALCHEMY_LOG_LEVEL wins; -v only raises the level above the silent default.
    level_env = resolve_env_log_level()
    level = level_env if level_env is not None else (level_cli if verbose else logging.CRITICAL)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = (
        ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else ColorMode.AUTO)
    )
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color, quiet=quiet > 0)
    ctx.obj["config_file"] = config_file
    ctx.obj["no_config"] = no_config
    logger.debug(
        "CLI state: log_level=%s color=%s config=%s no_config=%s",
        logging.getLevelName(level),
        enable_color,
        config_file,
        no_config,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TextAlchemy: style text, render JSON trees and build HTML pages and emails.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    config_file: str | None,
    no_config: bool,
) -> None:
    """Entry point for the TextAlchemy CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_file=config_file,
        no_config=no_config,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'textalchemy render FILE' to render a JSON document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(format_command)

cli.add_command(html_command)

cli.add_command(quote_command)

cli.add_command(email_command)

cli.add_command(render_command)

cli.add_command(parse_command)

if __name__ == "__main__":
    cli()
