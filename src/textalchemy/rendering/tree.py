# topmark:header:start
#
#   project      : TextAlchemy
#   file         : tree.py
#   file_relpath : src/textalchemy/rendering/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format-polymorphic entry point for the tree renderers.

All four encodings share one traversal contract:

- a negative depth at entry yields the format's elision token;
- scalars render directly and never consume depth;
- a non-empty container at depth 0 collapses to the elision token, while an
  empty container always renders its explicit empty marker;
- containers at positive depth recurse into their children at ``depth - 1``.

Rendering is pure: the input is never mutated and no I/O happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Final

from textalchemy.config.logging import get_logger
from textalchemy.core.formats import RenderFormat
from textalchemy.core.values import UNBOUNDED, classify
from textalchemy.rendering.html import render_html
from textalchemy.rendering.markdown import render_markdown
from textalchemy.rendering.pruned_json import render_json
from textalchemy.rendering.table import render_text_table

if TYPE_CHECKING:
    from textalchemy.config.logging import TextAlchemyLogger
    from textalchemy.core.values import Depth

logger: TextAlchemyLogger = get_logger(__name__)

Renderer = Callable[[Any, "Depth"], str]

_RENDERERS: Final[dict[RenderFormat, Renderer]] = {
    RenderFormat.HTML: render_html,
    RenderFormat.MARKDOWN: render_markdown,
    RenderFormat.TEXT_TABLE: render_text_table,
    RenderFormat.JSON: render_json,
}


@dataclass(frozen=True)
class RenderConfig:
    """Immutable rendering options.

    Attributes:
        format (RenderFormat): Target encoding.
        depth (Depth): Traversal budget; `UNBOUNDED` renders everything.
    """

    format: RenderFormat = RenderFormat.HTML
    depth: Depth = UNBOUNDED


def render(value: Any, config: RenderConfig) -> str:
    """Render ``value`` according to ``config``.

    Args:
        value (Any): A dynamic (JSON-like) value.
        config (RenderConfig): Target format and depth budget.

    Returns:
        str: The rendered text.

    Raises:
        CyclicStructureError: If ``value`` contains itself.
    """
    logger.trace(
        "render: format=%s depth=%s kind=%s",
        config.format.value,
        config.depth,
        classify(value).value,
    )
    return _RENDERERS[config.format](value, config.depth)


def render_tree(
    value: Any,
    *,
    format: RenderFormat | str = RenderFormat.HTML,
    depth: Depth = UNBOUNDED,
) -> str:
    """Keyword-argument convenience wrapper around `render`.

    Args:
        value (Any): A dynamic (JSON-like) value.
        format (RenderFormat | str): Target encoding or its string name
            (``"html"``, ``"markdown"``, ``"text-table"``, ``"json"``).
        depth (Depth): Traversal budget.

    Returns:
        str: The rendered text.

    Raises:
        ValueError: If ``format`` is not a known format name.
    """
    return render(value, RenderConfig(format=RenderFormat(format), depth=depth))
