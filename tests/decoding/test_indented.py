# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_indented.py
#   file_relpath : tests/decoding/test_indented.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the indentation-based formatter."""

from __future__ import annotations

from typing import Any

import pytest

from tests.conftest import b64
from textalchemy.core.errors import CyclicStructureError
from textalchemy.decoding.indented import format_indented, format_indented_auto


def test_nested_object() -> None:
    """Containers print a header line; entries follow one indent deeper."""
    assert format_indented({"a": {"b": 1}}, 3, "  ", False, False) == "a:\n  b: 1\n"


def test_arrays_use_indices() -> None:
    """Array elements are keyed by their index."""
    assert format_indented({"xs": [1, "two"]}, 3) == "xs:\n   0: 1\n   1: two\n"


def test_negative_depth_is_empty() -> None:
    """A negative budget prints nothing."""
    assert format_indented({"a": 1}, -1) == ""


def test_depth_truncates_silently() -> None:
    """Containers past the budget keep their header but lose their entries."""
    value = {"a": {"b": 1}, "c": 2}
    assert format_indented(value, 0, "  ") == "a:\nc: 2\n"
    assert format_indented(value, 1, "  ") == "a:\n  b: 1\nc: 2\n"


@pytest.mark.parametrize(
    "value, expected",
    [(5, "5\n"), (None, "null\n"), (True, "true\n"), ("s", "s\n")],
)
def test_top_level_scalar(value: Any, expected: str) -> None:
    """A scalar root prints as a single line."""
    assert format_indented(value, 3) == expected


def test_empty_containers() -> None:
    """Empty containers contribute only their header."""
    assert format_indented({"a": {}, "b": []}, 3) == "a:\nb:\n"
    assert format_indented({}, 3) == ""


def test_decode_base64_leaves() -> None:
    """Base64 leaves are decoded when asked."""
    value = {"msg": b64("hello"), "plain": "hello"}
    assert format_indented(value, 3, "  ", decode_base64=True) == "msg: hello\nplain: hello\n"
    assert format_indented(value, 3, "  ") == f"msg: {b64('hello')}\nplain: hello\n"


def test_recursive_json_expands_in_place() -> None:
    """Decoded JSON containers are formatted like any other container."""
    value = {"p": b64('{"a": 1}')}
    out = format_indented(value, 3, "  ", decode_base64=True, recursive_json=True)
    assert out == "p:\n  a: 1\n"


def test_recursive_json_at_top_level() -> None:
    """A Base64 root that decodes to JSON is expanded."""
    out = format_indented(b64('{"a": 1}'), 3, "  ", True, True)
    assert out == "a: 1\n"


def test_auto_depth_prints_everything() -> None:
    """The auto variant never truncates the input."""
    value = {"a": {"b": {"c": {"d": {"e": 1}}}}}
    assert format_indented_auto(value, "  ") == (
        "a:\n  b:\n    c:\n      d:\n        e: 1\n"
    )


def test_cycle_raises() -> None:
    """Self-containing values are rejected."""
    loop: dict[str, Any] = {}
    loop["again"] = loop
    with pytest.raises(CyclicStructureError):
        format_indented(loop, 100)
