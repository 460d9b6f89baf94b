# topmark:header:start
#
#   project      : TextAlchemy
#   file         : exit_codes.py
#   file_relpath : src/textalchemy/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the TextAlchemy CLI.

TextAlchemy aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. Click's own usage errors
(unknown commands or options) keep Click's default exit status 2.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the TextAlchemy CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid combination of flags/args. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input is malformed (e.g. invalid JSON). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: Internal error (e.g. a cyclic value). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
