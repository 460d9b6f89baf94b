# topmark:header:start
#
#   project      : TextAlchemy
#   file         : cmd_common.py
#   file_relpath : src/textalchemy/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
reaching the console and the effective settings through the Click context,
collecting text from arguments or STDIN, and translating library errors into
CLI errors with the right exit code.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from textalchemy.cli.console import ClickConsole
from textalchemy.cli.errors import TextAlchemyUsageError, from_library_error
from textalchemy.config.loader import load_settings
from textalchemy.config.logging import get_logger
from textalchemy.core.errors import TextAlchemyError
from textalchemy.io.loader import STDIN_NAME, read_text

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from textalchemy.cli.console import ConsoleLike
    from textalchemy.config.logging import TextAlchemyLogger
    from textalchemy.config.model import Settings

logger: TextAlchemyLogger = get_logger(__name__)

#: Argument value selecting STDIN as the input source.
STDIN_ARG = "-"

_NO_TEXT = "No text given: pass TEXT arguments or pipe text on STDIN."


@contextmanager
def library_errors() -> Iterator[None]:
    """Re-raise library `TextAlchemyError`s as CLI errors with matching exit codes."""
    try:
        yield
    except TextAlchemyError as exc:
        logger.debug("Library error: %s", exc)
        raise from_library_error(exc) from exc


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, creating a plain one if needed."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_settings(ctx: click.Context) -> Settings:
    """Return the settings from the configuration files, loading them on first use.

    The group stores ``config_file`` and ``no_config`` on the context; the
    files are only read by commands that need them, so ``version`` and the
    text commands never fail on a broken configuration.
    """
    ctx.ensure_object(dict)
    settings: Settings | None = ctx.obj.get("settings")
    if settings is None:
        with library_errors():
            settings = load_settings(
                config_file=ctx.obj.get("config_file"),
                use_discovery=not ctx.obj.get("no_config", False),
            )
        logger.debug("Effective settings: %s", settings)
        ctx.obj["settings"] = settings
    return settings


def read_source(source: str) -> tuple[str, str]:
    """Read an input source given on the command line.

    Args:
        source (str): A file path, or ``-`` for STDIN.

    Returns:
        tuple[str, str]: The display name of the source and its text.

    Raises:
        TextAlchemyFileNotFoundError: If the file does not exist.
        TextAlchemyIOError: If the file cannot be read.
    """
    if source == STDIN_ARG:
        return STDIN_NAME, click.get_text_stream("stdin").read()
    with library_errors():
        return source, read_text(source)


def collect_text(words: Sequence[str]) -> str:
    """Join the positional words of a text command, or read STDIN when there are none.

    A single trailing newline is removed from STDIN text.

    Raises:
        TextAlchemyUsageError: If neither arguments nor STDIN provide any text.
    """
    if words:
        return " ".join(words)
    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        raise TextAlchemyUsageError(_NO_TEXT)
    text = stdin.read()
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    if not text:
        raise TextAlchemyUsageError(_NO_TEXT)
    return text
