# topmark:header:start
#
#   project      : TextAlchemy
#   file         : professional.py
#   file_relpath : src/textalchemy/templates/professional.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``professional`` page template: a white sheet with a title banner."""

from __future__ import annotations

from textalchemy.constants import DEFAULT_TITLE
from textalchemy.rendering.html import escape_html
from textalchemy.templates.base import html_page
from textalchemy.templates.types import Audience

_SHARED_STYLES = """
  body {
    font-family: "Helvetica Neue", Helvetica, Arial, sans-serif;
    margin: 0;
    padding: 0;
    background: #f5f7fa;
    color: #1f2937;
  }
  .ta-pro {
    max-width: 720px;
    margin: 0 auto;
    background: #ffffff;
    border: 1px solid #e5e7eb;
    border-radius: 12px;
    overflow: hidden;
    box-shadow: 0 18px 36px rgba(15, 23, 42, 0.1);
  }
  .ta-pro__header {
    background: linear-gradient(135deg, #0f172a, #1d4ed8);
    padding: 32px 36px;
    color: #f8fafc;
  }
  .ta-pro__header h1 {
    margin: 0;
    font-size: 28px;
    letter-spacing: 0.02em;
  }
  .ta-pro__content {
    padding: 36px;
  }
  h2, h3 {
    color: #1f2937;
  }
  ul, ol {
    padding-left: 22px;
  }
  pre {
    background: #111827;
    color: #f9fafb;
    padding: 16px;
    border-radius: 8px;
    overflow-x: auto;
  }
  table {
    width: 100%;
    border-collapse: collapse;
  }
  ul.ta-array, ul.ta-object {
    list-style: none;
    padding-left: 18px;
  }
  .ta-key {
    color: #2563eb;
    font-weight: 600;
  }
"""

PROFESSIONAL_WEB_STYLES = _SHARED_STYLES

PROFESSIONAL_EMAIL_STYLES = (
    _SHARED_STYLES
    + """
  .ta-pro {
    width: 100%;
    max-width: 640px;
  }
  .ta-pro__content {
    padding: 28px;
  }
"""
)


def apply_professional_template(
    content: str,
    *,
    title: str = DEFAULT_TITLE,
    audience: Audience = Audience.WEB,
) -> str:
    """Wrap ``content`` in the professional page template; ``title`` also heads the banner."""
    styles = PROFESSIONAL_EMAIL_STYLES if audience is Audience.EMAIL else PROFESSIONAL_WEB_STYLES
    body = f"""  <main class="ta-pro">
    <header class="ta-pro__header">
      <h1>{escape_html(title)}</h1>
    </header>
    <section class="ta-pro__content">
      {content}
    </section>
  </main>"""
    return html_page(title, styles, body)
