# topmark:header:start
#
#   project      : TextAlchemy
#   file         : keys.py
#   file_relpath : src/textalchemy/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML keys recognized in ``textalchemy.toml`` and ``[tool.textalchemy]``."""

from __future__ import annotations

from typing import Final


class Toml:
    """Configuration key names, one constant per recognized key."""

    KEY_DEPTH: Final[str] = "depth"
    KEY_RENDER_DEPTH: Final[str] = "render_depth"
    KEY_INDENT: Final[str] = "indent"
    KEY_FORMAT: Final[str] = "format"
    KEY_TEMPLATE: Final[str] = "template"
    KEY_AUDIENCE: Final[str] = "audience"
    KEY_TITLE: Final[str] = "title"
    KEY_DECODE_BASE64: Final[str] = "decode_base64"
    KEY_RECURSIVE_JSON: Final[str] = "recursive_json"

    SECTION_TOOL: Final[str] = "tool"


#: Spellings of an unbounded depth budget accepted in TOML and on the command line.
UNBOUNDED_DEPTH_NAMES: Final[frozenset[str]] = frozenset({"all", "inf", "unbounded"})
