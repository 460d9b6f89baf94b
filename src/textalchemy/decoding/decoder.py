# topmark:header:start
#
#   project      : TextAlchemy
#   file         : decoder.py
#   file_relpath : src/textalchemy/decoding/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detect and decode Base64 string leaves.

A string is only treated as Base64 when it is *canonical*: long enough, a
multiple of four characters, drawn from the standard alphabet with at most two
trailing ``=``, and reproduced exactly by a decode/re-encode round trip. This
keeps ordinary words such as ``"test"`` or ``"abcd"`` from being decoded unless
they really are correctly padded Base64.

Decoding never fails past `decode_if_valid`: anything that cannot be turned
into UTF-8 text falls back to the original string.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
from typing import Any, Final

from textalchemy.config.logging import TextAlchemyLogger, get_logger
from textalchemy.core.errors import Base64DecodeError

logger: TextAlchemyLogger = get_logger(__name__)

BASE64_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9+/]*={0,2}")
MIN_BASE64_LENGTH: Final[int] = 4


def is_canonical_base64(text: str) -> bool:
    """Return True if ``text`` is canonically encoded standard Base64.

    Args:
        text (str): Candidate string.

    Returns:
        bool: True only if re-encoding the decoded bytes reproduces ``text``.
    """
    if not isinstance(text, str) or len(text) < MIN_BASE64_LENGTH or len(text) % 4:
        return False
    if BASE64_PATTERN.fullmatch(text) is None:
        return False
    try:
        raw: bytes = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(raw).decode("ascii") == text


def _decode_base64_text(text: str) -> str:
    """Decode canonical Base64 to UTF-8 text.

    Raises:
        Base64DecodeError: If the bytes are not valid Base64 or not valid UTF-8.
    """
    try:
        return base64.b64decode(text, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise Base64DecodeError(str(exc)) from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name!r}")


def try_parse_json(text: str) -> tuple[bool, Any]:
    """Parse ``text`` as strict JSON.

    ``NaN`` and ``Infinity`` literals are rejected, as a JSON parser would.

    Returns:
        tuple[bool, Any]: ``(True, value)`` on success, ``(False, text)`` otherwise.
    """
    try:
        return True, json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False, text


def decode_if_valid(text: str, recursive_json: bool = False) -> Any:
    """Decode ``text`` if it is canonical Base64.

    Args:
        text (str): A string leaf.
        recursive_json (bool): If True, also try to parse the decoded text as JSON.

    Returns:
        Any: ``text`` unchanged if it is not canonical Base64 or does not decode to
            UTF-8; otherwise the decoded text, or, with ``recursive_json``, the
            parsed JSON value when the decoded text is valid JSON.
    """
    if not is_canonical_base64(text):
        return text

    try:
        decoded: str = _decode_base64_text(text)
    except Base64DecodeError as exc:
        logger.debug("Keeping %r undecoded: %s", text[:32], exc)
        return text

    if not recursive_json:
        return decoded

    ok, value = try_parse_json(decoded)
    if ok:
        logger.trace("Decoded Base64 leaf parsed as JSON (%s)", type(value).__name__)
    return value
