# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_pruned_json.py
#   file_relpath : tests/rendering/test_pruned_json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the depth-pruned JSON renderer."""

from __future__ import annotations

import json
from typing import Any

import pytest

from textalchemy.core.formats import RenderFormat
from textalchemy.core.values import UNBOUNDED, UNDEFINED, max_depth
from textalchemy.rendering.pruned_json import placeholder, prune_depth, render_json
from textalchemy.rendering.tree import render_tree


def test_placeholders() -> None:
    """Pruned arrays keep their length; pruned objects do not."""
    assert placeholder([1, 2, 3]) == "[Array(3)]"
    assert placeholder({"a": 1}) == "{…}"


def test_nested_object_is_pruned() -> None:
    """A non-empty container at depth 0 becomes its placeholder."""
    assert render_json({"a": {"b": 1}}, 1) == '{\n  "a": "{…}"\n}'


def test_nested_array_is_pruned() -> None:
    """Array placeholders show the element count."""
    assert json.loads(render_json([1, [2, 3]], 1)) == [1, "[Array(2)]"]


def test_top_level_placeholder_is_verbatim() -> None:
    """A pruned root is returned as the bare placeholder text."""
    assert render_json({"a": 1}, 0) == "{…}"
    assert render_json([1], -1) == "[Array(1)]"


def test_empty_containers_survive_depth_zero() -> None:
    """Empty containers are never pruned."""
    assert render_json({}, 0) == "{}"
    assert prune_depth({"a": []}, 1) == {"a": []}


def test_scalars_pass_through() -> None:
    """Scalars within the budget are emitted as JSON."""
    assert render_json(None, UNBOUNDED) == "null"
    assert render_json(3, 0) == "3"
    assert render_json([3], 1) == "[\n  3\n]"
    assert prune_depth({"u": UNDEFINED}, UNBOUNDED) == {"u": None}


def test_unbounded_keeps_everything() -> None:
    """With an unbounded budget the output is the input."""
    value: dict[str, Any] = {"a": [1, {"b": [2, {"c": "é"}]}]}
    out = render_json(value, UNBOUNDED)
    assert json.loads(out) == value
    assert "é" in out


def test_input_is_not_mutated() -> None:
    """Pruning works on a copy."""
    value: dict[str, Any] = {"a": {"b": {"c": 1}}}
    prune_depth(value, 1)
    assert value == {"a": {"b": {"c": 1}}}


@pytest.mark.parametrize("value", [3, "s", None, True])
def test_negative_budget_elides_scalar_root(value: Any) -> None:
    """A negative budget elides a scalar root like the other formats do."""
    assert render_json(value, -1) == "…"
    assert render_tree(value, format=RenderFormat.JSON, depth=-1) == "…"


@pytest.mark.parametrize(
    "value",
    [
        {"a": {}},
        [[1], []],
        {"a": [1, {"b": [2, {"c": "x"}]}]},
        [{"k": None}, {"k": [True, 1.5]}],
        {},
    ],
)
def test_saturating_depth_keeps_everything(value: Any) -> None:
    """A budget equal to the nesting depth prunes nothing."""
    assert json.loads(render_json(value, max_depth(value))) == value
