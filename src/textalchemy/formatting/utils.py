# topmark:header:start
#
#   project      : TextAlchemy
#   file         : utils.py
#   file_relpath : src/textalchemy/formatting/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text utility functions."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def capitalize_words(text: str) -> str:
    """Capitalize the first letter of each space-separated word and lower-case the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate ``text`` to ``max_length`` characters, ending with ``suffix``.

    Text that already fits is returned unchanged. When ``max_length`` is shorter
    than ``suffix`` the result is the suffix alone.
    """
    if len(text) <= max_length:
        return text
    return text[: max(0, max_length - len(suffix))] + suffix


def normalize_text(text: str) -> str:
    """Collapse every whitespace run (newlines included) to one space and trim."""
    return _WHITESPACE.sub(" ", text).strip()
