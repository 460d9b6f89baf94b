# topmark:header:start
#
#   project      : TextAlchemy
#   file         : options.py
#   file_relpath : src/textalchemy/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the TextAlchemy CLI.

This module centralizes reusable options (verbosity, color, text styling) and
their resolution logic, so the group and the commands can stay thin. The
helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from textalchemy.cli.errors import TextAlchemyUsageError
from textalchemy.config.logging import TRACE_LEVEL, get_logger
from textalchemy.formatting.text import TextColor

if TYPE_CHECKING:
    from textalchemy.config.logging import TextAlchemyLogger

P = ParamSpec("P")
R = TypeVar("R")
T = TypeVar("T")

# Custom verbosity levels, mapped to standard logging levels
LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

logger: TextAlchemyLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when stdout is a TTY (and the environment agrees).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: If `output_format` is ``"json"``, return False.
        2. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        3. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        4. **Auto**: otherwise return ``stdout.isatty()``.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value; None means not given.
        output_format (str | None): Output format of the command, if already known.
        stdout_isatty (bool | None): Optional override for TTY detection.

    Returns:
        bool: True if ANSI color should be enabled.
    """
    if output_format and output_format.lower() == "json":
        return False

    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return stdout_isatty


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level requested with ``-v`` and ``-q``.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        TextAlchemyUsageError: If both flags are used together.

    Behavior:
        Three or more ``-v`` select TRACE, two DEBUG, one INFO.
        One or more ``-q`` select ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TextAlchemyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def explicit_value(ctx: click.Context, name: str, value: T) -> T | None:
    """Return ``value`` only if the option ``name`` was given on the command line.

    Flags always carry a value; this lets a flag left at its default defer to
    the configuration files instead of overriding them.
    """
    source = ctx.get_parameter_source(name)
    if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
        return value
    return None


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v INFO, -vv DEBUG, -vvv TRACE).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress warnings.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read settings from this TOML file (applied after discovered files).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and textalchemy.toml in the working directory.",
    )(f)
    return f


def inline_style_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--bold``, ``--italic`` and ``--color`` styling options to a command."""
    f = click.option("--bold", is_flag=True, help="Make the text bold.")(f)
    f = click.option("--italic", is_flag=True, help="Make the text italic.")(f)
    f = click.option(
        "--color",
        "text_color",
        type=click.Choice([c.value for c in TextColor]),
        default=None,
        help="Text color.",
    )(f)
    return f
