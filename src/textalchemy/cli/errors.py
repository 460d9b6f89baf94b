# topmark:header:start
#
#   project      : TextAlchemy
#   file         : errors.py
#   file_relpath : src/textalchemy/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TextAlchemy CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `from_library_error` maps the library's
    `TextAlchemyError` hierarchy onto them.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from textalchemy.cli.exit_codes import ExitCode
from textalchemy.core.errors import (
    ConfigError,
    CyclicStructureError,
    InputFileNotFoundError,
    InputReadError,
    InvalidJsonError,
    TextAlchemyError,
)


class TextAlchemyCliError(click.ClickException):
    """Base class for all TextAlchemy CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class TextAlchemyUsageError(TextAlchemyCliError):
    """Error for command-line invocation errors (invalid flag combinations)."""

    exit_code = ExitCode.USAGE_ERROR


class TextAlchemyDataError(TextAlchemyCliError):
    """Error for malformed input data (e.g. invalid JSON)."""

    exit_code = ExitCode.DATA_ERROR


class TextAlchemyFileNotFoundError(TextAlchemyCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TextAlchemyIOError(TextAlchemyCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class TextAlchemyConfigError(TextAlchemyCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TextAlchemySoftwareError(TextAlchemyCliError):
    """Error for internal failures such as a cyclic value reaching a renderer."""

    exit_code = ExitCode.SOFTWARE_ERROR


_ERROR_MAP: list[tuple[type[TextAlchemyError], type[TextAlchemyCliError]]] = [
    (InputFileNotFoundError, TextAlchemyFileNotFoundError),
    (InputReadError, TextAlchemyIOError),
    (InvalidJsonError, TextAlchemyDataError),
    (ConfigError, TextAlchemyConfigError),
    (CyclicStructureError, TextAlchemySoftwareError),
]


def from_library_error(exc: TextAlchemyError) -> TextAlchemyCliError:
    """Return the CLI error matching a library exception."""
    for lib_cls, cli_cls in _ERROR_MAP:
        if isinstance(exc, lib_cls):
            return cli_cls(str(exc))
    return TextAlchemyCliError(str(exc))
