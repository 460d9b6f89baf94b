# topmark:header:start
#
#   project      : TextAlchemy
#   file         : formats.py
#   file_relpath : src/textalchemy/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output format vocabulary shared across TextAlchemy frontends.

Kept free of Click and console dependencies so library code, CLI commands and
tests agree on the same names.
"""

from __future__ import annotations

from enum import Enum


class RenderFormat(str, Enum):
    """Encodings produced by the tree renderer.

    Attributes:
        HTML: Nested ``<ul>``/``<li>`` fragment with ``ta-*`` CSS classes.
        MARKDOWN: Nested bullet list, two spaces per level.
        TEXT_TABLE: Aligned plain-text table.
        JSON: Depth-pruned JSON document with 2-space indentation.
    """

    HTML = "html"
    MARKDOWN = "markdown"
    TEXT_TABLE = "text-table"
    JSON = "json"


class OutputFormat(str, Enum):
    """Output format for informational CLI commands (e.g. ``version``).

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable).
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
