# topmark:header:start
#
#   project      : TextAlchemy
#   file         : pruned_json.py
#   file_relpath : src/textalchemy/rendering/pruned_json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Depth-pruned JSON renderer."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from textalchemy.constants import ELLIPSIS
from textalchemy.core.values import UNDEFINED, PathGuard, ValueKind, classify

if TYPE_CHECKING:
    from textalchemy.core.values import Depth


def placeholder(value: Any) -> str:
    """Return the type-tagged stand-in for a pruned container."""
    if classify(value) is ValueKind.ARRAY:
        return f"[Array({len(value)})]"
    return f"{{{ELLIPSIS}}}"


def prune_depth(value: Any, depth: Depth) -> Any:
    """Return a copy of ``value`` with containers past ``depth`` replaced by placeholders.

    Scalars are kept as-is (`UNDEFINED` becomes ``None``, unknown objects their
    ``str()``); the input is never mutated.

    Raises:
        CyclicStructureError: If ``value`` contains itself.
    """
    return _prune(value, depth, PathGuard())


def _prune(value: Any, depth: Depth, guard: PathGuard) -> Any:
    kind = classify(value)
    if not kind.is_container:
        if value is UNDEFINED:
            return None
        if kind is ValueKind.STRING and not isinstance(value, str):
            return str(value)
        return value

    if depth < 0 or (depth == 0 and value):
        return placeholder(value)

    with guard.visit(value):
        if kind is ValueKind.ARRAY:
            return [_prune(item, depth - 1, guard) for item in value]
        return {str(key): _prune(child, depth - 1, guard) for key, child in value.items()}


def render_json(value: Any, depth: Depth) -> str:
    """Render the pruned copy of ``value`` as JSON with 2-space indentation.

    A negative budget elides the root: scalars give ``…`` and containers their
    placeholder. A top-level string (including a placeholder) is returned
    verbatim rather than JSON-quoted.
    """
    if depth < 0:
        return placeholder(value) if classify(value).is_container else ELLIPSIS
    pruned = prune_depth(value, depth)
    if isinstance(pruned, str):
        return pruned
    return json.dumps(pruned, indent=2, ensure_ascii=False)
