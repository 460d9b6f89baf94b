# topmark:header:start
#
#   project      : TextAlchemy
#   file         : simple.py
#   file_relpath : src/textalchemy/templates/simple.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``simple`` page template."""

from __future__ import annotations

from textalchemy.constants import DEFAULT_TITLE
from textalchemy.templates.base import html_page
from textalchemy.templates.types import Audience

_TAIL_STYLES = """
  h1, h2, h3 {
    color: #1f2933;
  }
  ul, ol {
    padding-left: 24px;
  }
  pre {
    background: #0f172a;
    color: #f8fafc;
    padding: 16px;
    border-radius: 8px;
    overflow-x: auto;
  }
"""

SIMPLE_WEB_STYLES = (
    """
  body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Arial, sans-serif;
    margin: 0;
    padding: 24px;
    background-color: #f7f9fc;
    color: #1f2933;
  }
  .ta-container {
    max-width: 800px;
    margin: 0 auto;
    background: #ffffff;
    border-radius: 12px;
    padding: 32px;
    box-shadow: 0 12px 32px rgba(15, 23, 42, 0.08);
    border: 1px solid rgba(15, 23, 42, 0.05);
  }"""
    + _TAIL_STYLES
)

SIMPLE_EMAIL_STYLES = (
    """
  body {
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Arial, sans-serif;
    margin: 0;
    padding: 0;
    background-color: #f7f9fc;
    color: #1f2933;
  }
  .ta-container {
    width: 100%;
    max-width: 600px;
    margin: 0 auto;
    background: #ffffff;
    border-radius: 12px;
    padding: 24px;
    border: 1px solid rgba(15, 23, 42, 0.05);
  }"""
    + _TAIL_STYLES
)


def apply_simple_template(
    content: str,
    *,
    title: str = DEFAULT_TITLE,
    audience: Audience = Audience.WEB,
) -> str:
    """Wrap ``content`` in the simple page template."""
    styles = SIMPLE_EMAIL_STYLES if audience is Audience.EMAIL else SIMPLE_WEB_STYLES
    body = f"""  <main class="ta-container">
    {content}
  </main>"""
    return html_page(title, styles, body)
