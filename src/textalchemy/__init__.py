# topmark:header:start
#
#   project      : TextAlchemy
#   file         : __init__.py
#   file_relpath : src/textalchemy/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy package.

TextAlchemy is a small text-formatting and templating toolkit. It styles short
strings, renders arbitrary JSON-like data as HTML, Markdown, text tables or
depth-pruned JSON, decodes Base64 leaves inside JSON documents, and wraps
rendered content in canned HTML page and email templates.

The most common entry points are re-exported here for convenience.
"""

from __future__ import annotations

from textalchemy.core.errors import CyclicStructureError, TextAlchemyError
from textalchemy.core.formats import RenderFormat
from textalchemy.core.values import UNBOUNDED, UNDEFINED, ValueKind, classify, max_depth
from textalchemy.decoding.decoder import decode_if_valid, is_canonical_base64
from textalchemy.decoding.indented import format_indented, format_indented_auto
from textalchemy.formatting.text import TextStyle, format_text
from textalchemy.formatting.utils import capitalize_words, normalize_text, truncate_text
from textalchemy.rendering.tree import RenderConfig, render, render_tree

__all__ = [
    "UNBOUNDED",
    "UNDEFINED",
    "CyclicStructureError",
    "RenderConfig",
    "RenderFormat",
    "TextAlchemyError",
    "TextStyle",
    "ValueKind",
    "capitalize_words",
    "classify",
    "decode_if_valid",
    "format_indented",
    "format_indented_auto",
    "format_text",
    "is_canonical_base64",
    "max_depth",
    "normalize_text",
    "render",
    "render_tree",
    "truncate_text",
]
