# topmark:header:start
#
#   project      : TextAlchemy
#   file         : table.py
#   file_relpath : src/textalchemy/rendering/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Aligned plain-text table renderer.

An array of objects becomes one row per element with the union of all keys
as columns (first-seen order). Anything else with entries (a single object, an
array of mixed values) is transposed into a two-column ``Key``/``Value`` table.
Cells never expand nested data: containers are summarized.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final

from textalchemy.constants import ELLIPSIS
from textalchemy.core.values import UNDEFINED, ValueKind, classify, scalar_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from textalchemy.core.values import Depth

EMPTY_TABLE: Final[str] = "(empty)"
KEY_COLUMN: Final[str] = "Key"
VALUE_COLUMN: Final[str] = "Value"
SUMMARY_KEY_LIMIT: Final[int] = 3


def summarize_value(value: Any) -> str:
    """Return a one-line summary of a container.

    Arrays give ``[Array(N)]``; objects list at most three keys, e.g.
    ``{ id, name, tags, … }``. Scalars return their text form.
    """
    kind = classify(value)
    if kind is ValueKind.ARRAY:
        return f"[Array({len(value)})]"
    if kind is ValueKind.OBJECT:
        keys = [str(k) for k in value]
        if not keys:
            return "{ }"
        suffix = ", …" if len(keys) > SUMMARY_KEY_LIMIT else ""
        return f"{{ {', '.join(keys[:SUMMARY_KEY_LIMIT])}{suffix} }}"
    return scalar_text(value)


def render_text_table(value: Any, depth: Depth) -> str:
    """Render ``value`` as an aligned text table.

    Args:
        value (Any): The dynamic value to render.
        depth (Depth): Remaining budget; container cells are summarized while it
            is positive and elided otherwise.

    Returns:
        str: The table (header, dash rule, rows), ``(empty)`` when there are no
            columns, or the text form of a scalar.
    """
    if depth < 0:
        return ELLIPSIS

    kind = classify(value)
    if not kind.is_container:
        return scalar_text(value)

    rows: list[Mapping[str, Any]]
    if kind is ValueKind.ARRAY and all(classify(row) is ValueKind.OBJECT for row in value):
        rows = list(value)
    else:
        rows = [{KEY_COLUMN: key, VALUE_COLUMN: child} for key, child in _entries(value)]

    columns: list[str] = list(dict.fromkeys(str(key) for row in rows for key in row))
    if not columns:
        return EMPTY_TABLE

    cells: list[list[str]] = [[_cell(row, column, depth) for column in columns] for row in rows]
    return _layout(columns, cells)


def _entries(value: Any) -> Iterable[tuple[str, Any]]:
    if isinstance(value, Mapping):
        return ((str(key), child) for key, child in value.items())
    return ((str(index), child) for index, child in enumerate(value))


def _cell(row: Mapping[str, Any], column: str, depth: Depth) -> str:
    value = row.get(column, UNDEFINED)
    if classify(value).is_container:
        return summarize_value(value) if depth > 0 else ELLIPSIS
    return scalar_text(value)


def _layout(columns: Sequence[str], cells: Sequence[Sequence[str]]) -> str:
    widths: list[int] = [len(column) for column in columns]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def _pad(text: str, w: int) -> str:
        return f"{text:<{w}}"

    header: str = " | ".join(_pad(column, widths[i]) for i, column in enumerate(columns))
    rule: str = "-|-".join("-" * w for w in widths)
    body: list[str] = [
        " | ".join(_pad(cell, widths[i]) for i, cell in enumerate(row)) for row in cells
    ]
    return "\n".join([header, rule, *body])
