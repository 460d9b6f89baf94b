# topmark:header:start
#
#   project      : TextAlchemy
#   file         : document.py
#   file_relpath : src/textalchemy/templates/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stand-alone document helpers: a configurable page, text blocks and quotes."""

from __future__ import annotations

from textalchemy.rendering.html import escape_html

_DOCUMENT_STYLES = """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            color: #333;
        }
        h1, h2, h3 {
            color: #2c3e50;
        }
        .highlight {
            background-color: #f8f9fa;
            padding: 15px;
            border-left: 4px solid #007bff;
            margin: 20px 0;
        }
"""


def create_html_template(
    content: str,
    *,
    title: str = "Text Alchemy Document",
    styles: str = "",
    body_class: str = "",
) -> str:
    """Return a basic HTML document around ``content``.

    Args:
        content (str): Trusted HTML body.
        title (str): Document title (escaped).
        styles (str): Extra CSS appended after the built-in rules.
        body_class (str): Value of the ``<body>`` ``class`` attribute (escaped).
    """
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape_html(title)}</title>
    <style>{_DOCUMENT_STYLES}        {styles}
    </style>
</head>
<body class="{escape_html(body_class)}">
    {content}
</body>
</html>"""


def create_text_block(text: str, class_name: str = "text-block") -> str:
    """Wrap ``text`` in a ``<div>`` with ``class_name``."""
    return f'<div class="{escape_html(class_name)}">{text}</div>'


def create_quote_block(quote: str, author: str | None = None) -> str:
    """Return a highlighted ``<blockquote>``, with a ``<cite>`` line when ``author`` is given."""
    author_html = f"<cite>— {escape_html(author)}</cite>" if author else ""
    return f"""
    <blockquote class="highlight">
        <p>{quote}</p>
        {author_html}
    </blockquote>
  """


def format_inline_html(
    text: str,
    *,
    bold: bool = False,
    italic: bool = False,
    color: str | None = None,
) -> str:
    """Escape ``text`` and wrap it in ``<strong>``, ``<em>`` and a colored ``<span>``.

    The wrappers are applied in that order, so the color span is outermost.
    """
    body = escape_html(text)
    if bold:
        body = f"<strong>{body}</strong>"
    if italic:
        body = f"<em>{body}</em>"
    if color:
        body = f'<span style="color: {escape_html(color)};">{body}</span>'
    return body
