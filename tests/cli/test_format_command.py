# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_format_command.py
#   file_relpath : tests/cli/test_format_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `format` command."""

from __future__ import annotations

import pytest

from tests.cli.conftest import assert_CLICK_USAGE, assert_SUCCESS, assert_USAGE_ERROR, run_cli


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["hello", "world", "--capitalize"], "Hello World"),
        (["hello world from typescript", "--camel"], "helloWorldFromTypescript"),
        (["Hello World", "--snake"], "hello_world"),
        (["very long text here", "--truncate", "10"], "very lo..."),
        (["  spaced \t  out  ", "--normalize"], "spaced out"),
        (["Hello", "--bold", "--italic"], "***Hello***"),
        (["Hello", "--underline"], "__Hello__"),
    ],
)
def test_format_variants(argv: list[str], expected: str) -> None:
    """Each option produces its transformation."""
    result = run_cli(["--no-color", "format", *argv])

    assert_SUCCESS(result)
    assert result.output == f"{expected}\n"


def test_transformations_win_over_styling() -> None:
    """--capitalize, --truncate and --normalize ignore the styling options."""
    result = run_cli(["--no-color", "format", "hello world", "--capitalize", "--bold"])

    assert_SUCCESS(result)
    assert result.output == "Hello World\n"


def test_color_is_emitted_when_enabled() -> None:
    """ANSI color codes are kept with --color always."""
    result = run_cli(["--color", "always", "format", "hi", "--color", "red"])

    assert_SUCCESS(result)
    assert result.output == "\x1b[31mhi\x1b[0m\n"


def test_color_is_stripped_when_disabled() -> None:
    """ANSI color codes are stripped with --no-color."""
    result = run_cli(["--no-color", "format", "hi", "--color", "purple"])

    assert_SUCCESS(result)
    assert result.output == "hi\n"


def test_text_from_stdin() -> None:
    """Without TEXT arguments, STDIN is read."""
    result = run_cli(["--no-color", "format", "--snake"], input_text="Hello World\n")

    assert_SUCCESS(result)
    assert result.output == "hello_world\n"


def test_missing_text_is_a_usage_error() -> None:
    """No arguments and empty STDIN is a usage error."""
    result = run_cli(["format", "--bold"], input_text="")

    assert_USAGE_ERROR(result)
    assert "No text given" in result.output


def test_unsupported_color_is_rejected() -> None:
    """Click validates the color choice."""
    assert_CLICK_USAGE(run_cli(["format", "hi", "--color", "pink"]))
