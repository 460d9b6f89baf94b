# topmark:header:start
#
#   project      : TextAlchemy
#   file         : model.py
#   file_relpath : src/textalchemy/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime settings model.

`Settings` is immutable; layers are combined with `Settings.merged`, which only
applies overrides that are not ``None`` so an unset CLI option never masks a
value coming from a configuration file.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from textalchemy.constants import DEFAULT_DEPTH, DEFAULT_INDENT, DEFAULT_TITLE
from textalchemy.core.formats import RenderFormat
from textalchemy.core.values import UNBOUNDED
from textalchemy.templates.types import Audience, TemplateStyle

if TYPE_CHECKING:
    from textalchemy.core.values import Depth


@dataclass(frozen=True)
class Settings:
    """Effective TextAlchemy settings.

    Attributes:
        depth (Depth): Traversal budget of the indentation formatter (`parse`).
        render_depth (Depth): Traversal budget of the tree renderer (`render`).
        indent (str): Indent unit of the indentation formatter.
        render_format (RenderFormat): Default tree-renderer format.
        template (TemplateStyle): Page template used when wrapping HTML.
        audience (Audience): Page layout (web or email).
        title (str): Document title used when wrapping HTML.
        decode_base64 (bool): Decode Base64 string leaves in `parse`.
        recursive_json (bool): Expand decoded leaves that are JSON.
    """

    depth: Depth = DEFAULT_DEPTH
    render_depth: Depth = UNBOUNDED
    indent: str = DEFAULT_INDENT
    render_format: RenderFormat = RenderFormat.HTML
    template: TemplateStyle = TemplateStyle.SIMPLE
    audience: Audience = Audience.WEB
    title: str = DEFAULT_TITLE
    decode_base64: bool = False
    recursive_json: bool = False

    def merged(self, **overrides: Any) -> Settings:
        """Return a copy with every non-``None`` override applied.

        Raises:
            TypeError: If an override names an unknown field.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown settings field(s): {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
