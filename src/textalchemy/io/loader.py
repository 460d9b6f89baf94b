# topmark:header:start
#
#   project      : TextAlchemy
#   file         : loader.py
#   file_relpath : src/textalchemy/io/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load JSON input for the renderers.

`load_json` is strict: a missing file, an unreadable file and malformed JSON
each raise a distinct `InputError`. `parse_json_or_text` is lenient and is used
for free-form input such as STDIN: text that is not JSON becomes a string leaf.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Final

from textalchemy.config.logging import TextAlchemyLogger, get_logger
from textalchemy.core.errors import InputFileNotFoundError, InputReadError, InvalidJsonError

logger: TextAlchemyLogger = get_logger(__name__)

STDIN_NAME: Final[str] = "<stdin>"


def read_text(path: Path | str, encoding: str = "utf-8") -> str:
    """Read ``path`` as text.

    Raises:
        InputFileNotFoundError: If ``path`` does not exist or is a directory.
        InputReadError: On permission, other OS or decoding errors.
    """
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise InputFileNotFoundError(p) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(p, exc) from exc


def load_json(path: Path | str) -> Any:
    """Read and parse the JSON document at ``path``.

    Returns:
        Any: The parsed dynamic value (object key order preserved).

    Raises:
        InputFileNotFoundError: If ``path`` does not exist.
        InputReadError: If ``path`` cannot be read.
        InvalidJsonError: If the content is not valid JSON.
    """
    text = read_text(path)
    data = parse_json(text, path)
    logger.debug("Loaded JSON from %s (%d chars)", path, len(text))
    return data


def parse_json(text: str, source: Path | str = STDIN_NAME) -> Any:
    """Parse ``text`` as JSON.

    Raises:
        InvalidJsonError: If ``text`` is not valid JSON; ``source`` names it in the message.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(source, exc) from exc


def parse_json_or_text(text: str) -> Any:
    """Parse ``text`` as JSON, or return it unchanged as a string leaf if it is not JSON."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        logger.debug("Input is not JSON; treating it as a string")
        return text
