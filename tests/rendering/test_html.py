# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_html.py
#   file_relpath : tests/rendering/test_html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the HTML tree renderer."""

from __future__ import annotations

from typing import Any

import pytest

from textalchemy.core.errors import CyclicStructureError
from textalchemy.core.values import UNBOUNDED
from textalchemy.rendering.html import (
    ELIDED_HTML,
    EMPTY_ARRAY_HTML,
    EMPTY_OBJECT_HTML,
    escape_html,
    render_html,
)


def test_empty_object_renders_empty_marker() -> None:
    """An empty object is an explicit marker, never an empty string or null."""
    out = render_html({}, UNBOUNDED)
    assert out == EMPTY_OBJECT_HTML
    assert out and "null" not in out


def test_empty_containers_ignore_depth() -> None:
    """Empty containers render their marker even at depth 0."""
    assert render_html([], 0) == EMPTY_ARRAY_HTML
    assert render_html({}, 0) == EMPTY_OBJECT_HTML


def test_object_entries() -> None:
    """Object entries become list items with a key span."""
    assert render_html({"a": 1}, 1) == (
        '<ul class="ta-object"><li><span class="ta-key">a:</span> '
        '<span class="ta-primitive">1</span></li></ul>'
    )


def test_array_items() -> None:
    """Array items become plain list items in order."""
    assert render_html([True, None, "s"], UNBOUNDED) == (
        '<ul class="ta-array">'
        '<li><span class="ta-primitive">true</span></li>'
        '<li><span class="ta-null">null</span></li>'
        '<li><span class="ta-string">s</span></li>'
        "</ul>"
    )


def test_non_empty_container_at_depth_zero_is_elided() -> None:
    """A nested non-empty container past the budget collapses to the elision token."""
    out = render_html({"a": {"b": 1}, "c": 2}, 1)
    assert ELIDED_HTML in out
    assert '<span class="ta-primitive">2</span>' in out
    assert "ta-key\">b:" not in out


def test_negative_depth_elides_even_scalars() -> None:
    """A negative budget at entry yields the elision token."""
    assert render_html(1, -1) == ELIDED_HTML


def test_scalars_do_not_consume_depth() -> None:
    """Scalars render at depth 0."""
    assert render_html("x", 0) == '<span class="ta-string">x</span>'
    assert render_html(None, 0) == '<span class="ta-null">null</span>'


@pytest.mark.parametrize(
    "text, expected",
    [
        ("<b>", "&lt;b&gt;"),
        ("a & b", "a &amp; b"),
        ('"q"', "&quot;q&quot;"),
        ("it's", "it&#x27;s"),
    ],
)
def test_escape_html_covers_five_characters(text: str, expected: str) -> None:
    """All of ``& < > " '`` are escaped."""
    assert escape_html(text) == expected


def test_strings_and_keys_are_escaped() -> None:
    """User text never reaches the fragment unescaped."""
    out = render_html({"<k>": "<script>"}, UNBOUNDED)
    assert "<script>" not in out
    assert "&lt;k&gt;:" in out
    assert "&lt;script&gt;" in out


def test_input_is_not_mutated() -> None:
    """Rendering is pure."""
    value: dict[str, Any] = {"a": [1, {"b": 2}]}
    render_html(value, 1)
    assert value == {"a": [1, {"b": 2}]}


def test_cycle_raises() -> None:
    """A self-containing value is reported instead of recursing forever."""
    loop: dict[str, Any] = {}
    loop["self"] = loop
    with pytest.raises(CyclicStructureError):
        render_html(loop, UNBOUNDED)
