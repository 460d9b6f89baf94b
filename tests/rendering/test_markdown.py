# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_markdown.py
#   file_relpath : tests/rendering/test_markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the Markdown tree renderer."""

from __future__ import annotations

from typing import Any

import pytest

from textalchemy.core.values import UNBOUNDED
from textalchemy.rendering.markdown import render_markdown


def test_object_with_array_value() -> None:
    """Array items are bullets nested under the key header."""
    assert render_markdown({"x": [1, 2, 3]}, UNBOUNDED) == "- **x**:\n  - 1\n  - 2\n  - 3"


def test_scalar_entries_stay_inline() -> None:
    """Scalar object values follow the key on the same line."""
    assert render_markdown({"a": 1, "b": "two", "c": None}, 1) == (
        "- **a**: 1\n- **b**: two\n- **c**: null"
    )


@pytest.mark.parametrize(
    "value, expected",
    [
        ([], "- (empty array)"),
        ({}, "- (empty object)"),
        ("hi", "- hi"),
        (False, "- false"),
    ],
)
def test_top_level_values(value: Any, expected: str) -> None:
    """Empty containers and scalars render as a single bullet."""
    assert render_markdown(value, UNBOUNDED) == expected


def test_depth_limits() -> None:
    """Past the budget a container becomes an ellipsis bullet."""
    assert render_markdown({"a": 1}, 0) == "- …"
    assert render_markdown({"a": {"b": 1}}, 1) == "- **a**:\n  - …"
    assert render_markdown(1, -1) == "- …"


def test_nested_array_items_indent_one_level() -> None:
    """Container items of an array are rendered one level deeper."""
    assert render_markdown([1, [2, 3]], UNBOUNDED) == "- 1\n  - 2\n  - 3"


def test_empty_nested_container() -> None:
    """Nested empty containers keep their explicit marker."""
    assert render_markdown({"a": []}, UNBOUNDED) == "- **a**:\n  - (empty array)"
