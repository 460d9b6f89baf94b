# topmark:header:start
#
#   project      : TextAlchemy
#   file         : indented.py
#   file_relpath : src/textalchemy/decoding/indented.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation-based JSON-to-text formatter.

Emits one ``key: value`` line per scalar and a ``key:`` header line per
container, whose entries follow one indent unit deeper. Array elements use
their index as the key. String leaves can optionally be Base64-decoded, and a
decoded payload that parses as JSON is expanded in place like any other
container.

Unlike the tree renderers, running out of depth does not leave a marker: the
entries below the budget are silently dropped.

Example:
    >>> format_indented({"a": {"b": 1}}, 3, "  ")
    'a:\\n  b: 1\\n'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from textalchemy.config.logging import TextAlchemyLogger, get_logger
from textalchemy.constants import DEFAULT_INDENT
from textalchemy.core.values import PathGuard, ValueKind, classify, max_depth, scalar_text
from textalchemy.decoding.decoder import decode_if_valid

if TYPE_CHECKING:
    from collections.abc import Iterable

    from textalchemy.core.values import Depth

logger: TextAlchemyLogger = get_logger(__name__)


@dataclass
class _IndentedFormatter:
    indent_unit: str
    decode_base64: bool
    recursive_json: bool
    guard: PathGuard = field(default_factory=PathGuard)

    def leaf(self, value: Any) -> Any:
        if self.decode_base64 and isinstance(value, str):
            return decode_if_valid(value, self.recursive_json)
        return value

    def container(self, value: Any, depth: Depth, indent: str) -> list[str]:
        if depth < 0:
            return []
        lines: list[str] = []
        with self.guard.visit(value):
            for key, child in _entries(value):
                if not classify(child).is_container:
                    child = self.leaf(child)
                if classify(child).is_container:
                    lines.append(f"{indent}{key}:\n")
                    lines.extend(self.container(child, depth - 1, indent + self.indent_unit))
                else:
                    lines.append(f"{indent}{key}: {scalar_text(child)}\n")
        return lines


def _entries(value: Any) -> Iterable[tuple[str, Any]]:
    if classify(value) is ValueKind.OBJECT:
        return ((str(key), child) for key, child in value.items())
    return ((str(index), child) for index, child in enumerate(value))


def format_indented(
    value: Any,
    depth: Depth,
    indent_unit: str = DEFAULT_INDENT,
    decode_base64: bool = False,
    recursive_json: bool = False,
) -> str:
    """Format ``value`` as indented ``key: value`` lines.

    Args:
        value (Any): A dynamic (JSON-like) value. A top-level scalar prints as a
            single line.
        depth (Depth): Traversal budget; a negative budget yields ``""``.
        indent_unit (str): Prefix added per nesting level.
        decode_base64 (bool): Decode canonical Base64 string leaves.
        recursive_json (bool): Parse decoded leaves as JSON and expand the result.
            Only meaningful together with ``decode_base64``.

    Returns:
        str: Newline-terminated lines (possibly empty).

    Raises:
        CyclicStructureError: If ``value`` contains itself.
    """
    if depth < 0:
        return ""

    formatter = _IndentedFormatter(indent_unit, decode_base64, recursive_json)
    if not classify(value).is_container:
        value = formatter.leaf(value)
        if not classify(value).is_container:
            return f"{scalar_text(value)}\n"

    return "".join(formatter.container(value, depth, ""))


def format_indented_auto(
    value: Any,
    indent_unit: str = DEFAULT_INDENT,
    decode_base64: bool = False,
    recursive_json: bool = False,
) -> str:
    """Format ``value`` with a budget equal to its own nesting depth.

    The budget covers the whole input, so nothing in it is ever truncated.
    Subtrees produced by ``recursive_json`` decoding are still bounded by it.
    """
    depth = max_depth(value)
    logger.debug("format_indented_auto: resolved depth=%d", depth)
    return format_indented(value, depth, indent_unit, decode_base64, recursive_json)
