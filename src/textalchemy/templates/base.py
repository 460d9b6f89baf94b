# topmark:header:start
#
#   project      : TextAlchemy
#   file         : base.py
#   file_relpath : src/textalchemy/templates/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML page skeleton shared by the page templates."""

from __future__ import annotations

from textalchemy.rendering.html import escape_html


def html_page(title: str, styles: str, body: str) -> str:
    """Return a complete HTML5 document.

    Args:
        title (str): Document title (escaped).
        styles (str): CSS inserted verbatim into a ``<style>`` element.
        body (str): Trusted HTML inserted verbatim into ``<body>``.
    """
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{escape_html(title)}</title>
  <style>{styles}</style>
</head>
<body>
{body}
</body>
</html>"""
