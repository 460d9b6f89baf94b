# topmark:header:start
#
#   project      : TextAlchemy
#   file         : values.py
#   file_relpath : src/textalchemy/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamic JSON-like values: classification, text forms and traversal helpers.

A *dynamic value* mirrors a parsed JSON document: ``None``, ``bool``, ``int``,
``float``, ``str``, lists (or tuples) and mappings with string keys. Mapping
iteration order is the object key order and is preserved by every renderer.

Every renderer calls `classify` exactly once per node and branches on the
returned `ValueKind`; no walker re-inspects Python types ad hoc.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Union

from textalchemy.core.errors import CyclicStructureError

if TYPE_CHECKING:
    from collections.abc import Iterator

#: A traversal budget. Integers count remaining descents; `UNBOUNDED` never runs out.
Depth = Union[int, float]

UNBOUNDED: Final[float] = math.inf


class _Undefined:
    """Sentinel for an absent value (a missing key, an unset cell)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


#: Absent value; classified as `ValueKind.NULL` but rendered as ``undefined``.
UNDEFINED: Final[_Undefined] = _Undefined()


class ValueKind(str, Enum):
    """The six classes a dynamic value can belong to."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        """True for `ARRAY` and `OBJECT`."""
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def classify(value: Any) -> ValueKind:
    """Return the `ValueKind` of ``value``.

    ``bool`` is tested before numbers since it subclasses ``int``. Lists and
    tuples are arrays, any `Mapping` is an object. Objects of any other type
    are treated as strings and rendered through ``str()``.

    Args:
        value (Any): The value to classify.

    Returns:
        ValueKind: Exactly one kind; this function never fails.
    """
    if value is None or value is UNDEFINED:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    return ValueKind.STRING


def _number_text(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def scalar_text(value: Any) -> str:
    """Return the canonical text form of a scalar.

    ``None`` is ``null`` and `UNDEFINED` is ``undefined``; booleans are
    lower-case; integral floats drop their ``.0``.
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return "undefined" if value is UNDEFINED else "null"
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return _number_text(value)
    return str(value)


class PathGuard:
    """Tracks the containers on the current traversal path.

    Walkers enter every container through `visit`; re-entering a container
    that is still open raises `CyclicStructureError`. Siblings that share a
    reference are fine because a container leaves the path once walked.
    """

    def __init__(self) -> None:
        self._open: set[int] = set()

    @contextmanager
    def visit(self, value: Any) -> Iterator[None]:
        """Mark ``value`` as open for the duration of the ``with`` block.

        Raises:
            CyclicStructureError: If ``value`` is already open on this path.
        """
        key = id(value)
        if key in self._open:
            raise CyclicStructureError(classify(value).value)
        self._open.add(key)
        try:
            yield
        finally:
            self._open.discard(key)


def max_depth(value: Any) -> int:
    """Return the nesting depth of ``value``.

    Scalars and empty containers have depth 0; a non-empty container is one
    deeper than its deepest child.

    Raises:
        CyclicStructureError: If ``value`` contains itself.
    """
    return _max_depth(value, PathGuard())


def _max_depth(value: Any, guard: PathGuard) -> int:
    kind = classify(value)
    if not kind.is_container or not value:
        return 0
    children = value.values() if kind is ValueKind.OBJECT else value
    with guard.visit(value):
        return 1 + max(_max_depth(child, guard) for child in children)
