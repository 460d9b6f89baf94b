# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_parse_command.py
#   file_relpath : tests/cli/test_parse_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `parse` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_DATA_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    run_cli,
    write_json,
)
from tests.conftest import b64

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_file(tmp_path: Path) -> None:
    """A JSON file prints as indented lines."""
    path = write_json(tmp_path, '{"a": {"b": 1}, "c": [true, null]}')
    result = run_cli(["parse", path, "--indent", "  "])

    assert_SUCCESS(result)
    assert result.output == "a:\n  b: 1\nc:\n  0: true\n  1: null\n"


def test_parse_default_depth_truncates() -> None:
    """The default depth of 3 hides deeper containers."""
    document = '{"a": {"b": {"c": {"d": {"e": 1}}}}}'
    result = run_cli(["parse", "-", "--indent", "."], input_text=document)

    assert_SUCCESS(result)
    assert result.output == "a:\n.b:\n..c:\n...d:\n"


def test_parse_auto_depth() -> None:
    """--depth auto prints the whole document."""
    document = '{"a": {"b": {"c": {"d": {"e": 1}}}}}'
    result = run_cli(["parse", "-", "--depth", "auto", "--indent", "."], input_text=document)

    assert_SUCCESS(result)
    assert result.output == "a:\n.b:\n..c:\n...d:\n....e: 1\n"


def test_parse_decodes_base64() -> None:
    """Base64 leaves are decoded and their JSON expanded."""
    document = json.dumps({"p": b64('{"a": 1}'), "m": b64("hi")})
    result = run_cli(
        ["parse", "-", "--decode-base64", "--recursive-json", "--indent", "  "],
        input_text=document,
    )

    assert_SUCCESS(result)
    assert result.output == "p:\n  a: 1\nm: hi\n"


def test_parse_indent_from_config(tmp_path: Path) -> None:
    """The indent unit can be configured."""
    (tmp_path / "textalchemy.toml").write_text('indent = "-"\n', encoding="utf-8")
    result = run_cli(["parse", "-"], input_text='{"a": {"b": 1}}')

    assert_SUCCESS(result)
    assert result.output == "a:\n-b: 1\n"


def test_parse_invalid_json(tmp_path: Path) -> None:
    """Unlike render, parse requires valid JSON."""
    path = write_json(tmp_path, "{oops")
    result = run_cli(["parse", path])

    assert_DATA_ERROR(result)
    assert "Error parsing" in result.output


def test_parse_missing_file() -> None:
    """A missing input file exits with FILE_NOT_FOUND."""
    assert_FILE_NOT_FOUND(run_cli(["parse", "nope.json"]))
