# topmark:header:start
#
#   project      : TextAlchemy
#   file         : errors.py
#   file_relpath : src/textalchemy/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for TextAlchemy.

These exceptions are raised by the Click-free library layers. The CLI maps them
to `click.ClickException` subclasses with sysexits-aligned exit codes (see
`textalchemy.cli.errors`).
"""

from __future__ import annotations

from pathlib import Path


class TextAlchemyError(Exception):
    """Base class for all TextAlchemy library errors."""


class CyclicStructureError(TextAlchemyError):
    """A container was reached again while it was still being walked.

    Parsed JSON is always acyclic, but hand-built Python values are not; the
    walkers raise this instead of recursing forever.
    """

    def __init__(self, kind: str) -> None:
        super().__init__(f"Cyclic structure detected: {kind} contains itself")
        self.kind = kind


class Base64DecodeError(TextAlchemyError):
    """A canonical Base64 string could not be turned into UTF-8 text.

    Internal to `textalchemy.decoding.decoder`; never escapes `decode_if_valid`.
    """


class ConfigError(TextAlchemyError):
    """A configuration file is unreadable, malformed, or holds a wrongly typed value."""


class InputError(TextAlchemyError):
    """Base class for failures loading the JSON input file."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)


class InputFileNotFoundError(InputError):
    """The input file does not exist (or is a directory)."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(path, f"Input file not found: {path}")


class InputReadError(InputError):
    """The input file exists but could not be read or decoded as UTF-8."""

    def __init__(self, path: Path | str, reason: object) -> None:
        super().__init__(path, f"Error reading {path}: {reason}")


class InvalidJsonError(InputError):
    """The input file was read but does not contain valid JSON."""

    def __init__(self, path: Path | str, reason: object) -> None:
        super().__init__(path, f"Error parsing {path}: {reason}")
