# topmark:header:start
#
#   project      : TextAlchemy
#   file         : html.py
#   file_relpath : src/textalchemy/rendering/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML fragment renderer.

Scalars become ``<span>`` elements with a semantic ``ta-*`` class, arrays and
objects become nested ``<ul>`` lists. The classes match the selectors used by
the bundled page templates (see `textalchemy.templates`).
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING, Any, Final

from textalchemy.constants import ELLIPSIS
from textalchemy.core.values import PathGuard, ValueKind, classify, scalar_text

if TYPE_CHECKING:
    from textalchemy.core.values import Depth

ELIDED_HTML: Final[str] = f'<span class="ta-ellipsis">{ELLIPSIS}</span>'
EMPTY_OBJECT_HTML: Final[str] = '<span class="ta-empty">{ }</span>'
EMPTY_ARRAY_HTML: Final[str] = '<span class="ta-empty">[ ]</span>'


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for safe insertion into HTML text and attributes."""
    return html.escape(text, quote=True)


def render_html(value: Any, depth: Depth) -> str:
    """Render ``value`` as an HTML fragment.

    Args:
        value (Any): The dynamic value to render.
        depth (Depth): Remaining descents into arrays/objects.

    Returns:
        str: The HTML fragment (never empty).

    Raises:
        CyclicStructureError: If ``value`` contains itself.
    """
    return _render(value, depth, PathGuard())


def _render(value: Any, depth: Depth, guard: PathGuard) -> str:
    if depth < 0:
        return ELIDED_HTML

    kind = classify(value)
    if kind is ValueKind.NULL:
        return f'<span class="ta-null">{scalar_text(value)}</span>'
    if kind is ValueKind.STRING:
        return f'<span class="ta-string">{escape_html(str(value))}</span>'
    if kind in (ValueKind.NUMBER, ValueKind.BOOLEAN):
        return f'<span class="ta-primitive">{escape_html(scalar_text(value))}</span>'

    if not value:
        return EMPTY_ARRAY_HTML if kind is ValueKind.ARRAY else EMPTY_OBJECT_HTML
    if depth == 0:
        return ELIDED_HTML

    with guard.visit(value):
        if kind is ValueKind.ARRAY:
            items = "".join(f"<li>{_render(item, depth - 1, guard)}</li>" for item in value)
            return f'<ul class="ta-array">{items}</ul>'

        items = "".join(
            f'<li><span class="ta-key">{escape_html(str(key))}:</span> '
            f"{_render(child, depth - 1, guard)}</li>"
            for key, child in value.items()
        )
        return f'<ul class="ta-object">{items}</ul>'
