# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_document.py
#   file_relpath : tests/templates/test_document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the stand-alone document helpers."""

from __future__ import annotations

from textalchemy.templates.document import (
    create_html_template,
    create_quote_block,
    create_text_block,
    format_inline_html,
)


def test_create_html_template() -> None:
    """The document embeds extra styles, body class and content."""
    out = create_html_template("<p>c</p>", title="Doc", styles=".x{}", body_class="wide")
    assert "<title>Doc</title>" in out
    assert ".x{}" in out
    assert '<body class="wide">' in out
    assert "<p>c</p>" in out


def test_create_text_block() -> None:
    """Text blocks are classed divs."""
    assert create_text_block("x") == '<div class="text-block">x</div>'
    assert create_text_block("x", "note") == '<div class="note">x</div>'


def test_create_quote_block() -> None:
    """Quotes cite their author when given."""
    out = create_quote_block("Stay hungry", "Jobs")
    assert '<blockquote class="highlight">' in out
    assert "<p>Stay hungry</p>" in out
    assert "<cite>— Jobs</cite>" in out
    assert "<cite>" not in create_quote_block("Anonymous")


def test_format_inline_html_order_and_escaping() -> None:
    """Text is escaped, then bold, italic and color wrap it in that order."""
    out = format_inline_html("a<b", bold=True, italic=True, color="red")
    assert out == '<span style="color: red;"><em><strong>a&lt;b</strong></em></span>'
    assert format_inline_html("plain") == "plain"
