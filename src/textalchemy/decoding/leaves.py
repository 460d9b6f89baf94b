# topmark:header:start
#
#   project      : TextAlchemy
#   file         : leaves.py
#   file_relpath : src/textalchemy/decoding/leaves.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode every Base64 string leaf of a value ahead of tree rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textalchemy.core.values import UNBOUNDED, PathGuard, ValueKind, classify
from textalchemy.decoding.decoder import decode_if_valid

if TYPE_CHECKING:
    from textalchemy.core.values import Depth


def decode_leaves(value: Any, depth: Depth = UNBOUNDED, recursive_json: bool = False) -> Any:
    """Return a copy of ``value`` with canonical Base64 string leaves decoded.

    A leaf that decodes to JSON (with ``recursive_json``) is replaced by the
    parsed value and walked in turn, with the budget left at its position.
    Containers past ``depth`` are kept as they are.

    Raises:
        CyclicStructureError: If ``value`` contains itself.
    """
    return _decode(value, depth, recursive_json, PathGuard())


def _decode(value: Any, depth: Depth, recursive_json: bool, guard: PathGuard) -> Any:
    kind = classify(value)
    if kind is ValueKind.STRING and isinstance(value, str):
        decoded = decode_if_valid(value, recursive_json)
        if classify(decoded).is_container:
            return _decode(decoded, depth, recursive_json, guard)
        return decoded
    if not kind.is_container or depth < 0:
        return value

    with guard.visit(value):
        if kind is ValueKind.ARRAY:
            return [_decode(item, depth - 1, recursive_json, guard) for item in value]
        return {
            key: _decode(child, depth - 1, recursive_json, guard) for key, child in value.items()
        }
