# topmark:header:start
#
#   project      : TextAlchemy
#   file         : markdown.py
#   file_relpath : src/textalchemy/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown nested-list renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textalchemy.constants import ELLIPSIS, MARKDOWN_INDENT
from textalchemy.core.values import PathGuard, ValueKind, classify, scalar_text

if TYPE_CHECKING:
    from textalchemy.core.values import Depth


def render_markdown(value: Any, depth: Depth) -> str:
    """Render ``value`` as a Markdown bullet list.

    Object entries become ``- **key**: value`` bullets; container values put
    their nested block on the following lines, one indent unit deeper. Array
    elements are bullets at the array's own level.

    Args:
        value (Any): The dynamic value to render.
        depth (Depth): Remaining descents into arrays/objects.

    Returns:
        str: Markdown lines joined with ``\\n`` (no trailing newline).

    Raises:
        CyclicStructureError: If ``value`` contains itself.
    """
    return "\n".join(_render(value, depth, 0, PathGuard()))


def _render(value: Any, depth: Depth, level: int, guard: PathGuard) -> list[str]:
    pad: str = MARKDOWN_INDENT * level
    if depth < 0:
        return [f"{pad}- {ELLIPSIS}"]

    kind = classify(value)
    if not kind.is_container:
        return [f"{pad}- {scalar_text(value)}"]
    if not value:
        return [f"{pad}- (empty {kind.value})"]
    if depth == 0:
        return [f"{pad}- {ELLIPSIS}"]

    lines: list[str] = []
    with guard.visit(value):
        if kind is ValueKind.ARRAY:
            for item in value:
                if classify(item).is_container:
                    lines.extend(_render(item, depth - 1, level + 1, guard))
                else:
                    lines.append(f"{pad}- {scalar_text(item)}")
            return lines

        for key, child in value.items():
            header = f"{pad}- **{key}**:"
            if classify(child).is_container:
                lines.append(header)
                lines.extend(_render(child, depth - 1, level + 1, guard))
            else:
                lines.append(f"{header} {scalar_text(child)}")
    return lines
