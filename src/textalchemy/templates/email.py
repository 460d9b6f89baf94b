# topmark:header:start
#
#   project      : TextAlchemy
#   file         : email.py
#   file_relpath : src/textalchemy/templates/email.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Email templates.

An email is an `EmailContent` (greeting, body, closing, signature) laid out
either as a styled HTML document or as plain text with ``Subject``/``To``/
``From`` headers. The body is trusted HTML; every other field is escaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from textalchemy.constants import GENERATED_WITH
from textalchemy.rendering.html import escape_html
from textalchemy.templates.document import format_inline_html

DEFAULT_SUBJECT: Final[str] = "Email from Text Alchemy"
DEFAULT_RECIPIENT: Final[str] = "Recipient"
DEFAULT_SENDER: Final[str] = "Sender"


class EmailTemplate(str, Enum):
    """Header color schemes for HTML emails."""

    SIMPLE = "simple"
    PRETTY = "pretty"
    PROFESSIONAL = "professional"
    CASUAL = "casual"


class EmailFormat(str, Enum):
    """Email body encodings."""

    HTML = "html"
    TEXT = "text"


@dataclass(frozen=True)
class EmailContent:
    """The parts of an email body.

    Attributes:
        body (str): Main content (trusted HTML in the HTML layout).
        greeting (str | None): Opening line.
        closing (str | None): Closing line.
        signature (str | None): Signature line.
    """

    body: str
    greeting: str | None = None
    closing: str | None = None
    signature: str | None = None


_BASE_STYLES = """
    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
      line-height: 1.6;
      margin: 0;
      padding: 20px;
      background-color: #f8f9fa;
    }
    .email-container {
      max-width: 600px;
      margin: 0 auto;
      background: white;
      border-radius: 8px;
      box-shadow: 0 2px 10px rgba(0,0,0,0.1);
      overflow: hidden;
    }
    .email-header {
      color: white;
      padding: 30px;
      text-align: center;
    }
    .email-subject {
      margin: 0 0 15px 0;
      font-size: 24px;
      font-weight: 300;
    }
    .email-meta {
      font-size: 14px;
      opacity: 0.9;
    }
    .email-meta p {
      margin: 5px 0;
    }
    .email-body {
      padding: 30px;
    }
    .greeting {
      font-size: 16px;
      margin-bottom: 20px;
      color: #2c3e50;
    }
    .content {
      font-size: 15px;
      line-height: 1.7;
      color: #34495e;
      margin-bottom: 20px;
    }
    .closing {
      font-size: 15px;
      margin: 20px 0 10px 0;
      color: #2c3e50;
    }
    .signature {
      font-size: 14px;
      color: #7f8c8d;
      font-style: italic;
    }
    .email-footer {
      background: #f8f9fa;
      padding: 15px 30px;
      text-align: center;
      border-top: 1px solid #e9ecef;
    }
    .footer-text {
      margin: 0;
      font-size: 12px;
      color: #6c757d;
    }
"""

_TEMPLATE_STYLES: Final[dict[EmailTemplate, str]] = {
    EmailTemplate.SIMPLE: """
    .email-header {
      background: #007bff;
    }
""",
    EmailTemplate.PRETTY: """
    .email-header {
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
    }
""",
    EmailTemplate.PROFESSIONAL: """
    .email-header {
      background: linear-gradient(135deg, #2c3e50 0%, #34495e 100%);
    }
    .email-container {
      border: 1px solid #dee2e6;
    }
""",
    EmailTemplate.CASUAL: """
    .email-header {
      background: linear-gradient(135deg, #ff6b6b 0%, #feca57 100%);
    }
    .email-container {
      border-radius: 12px;
    }
""",
}


def get_template_styles(template: EmailTemplate | str) -> str:
    """Return the CSS for ``template``; unknown names fall back to ``pretty``."""
    try:
        key = EmailTemplate(template)
    except ValueError:
        key = EmailTemplate.PRETTY
    return _BASE_STYLES + _TEMPLATE_STYLES[key]


def _optional_paragraph(css_class: str, text: str | None) -> str:
    return f'<p class="{css_class}">{escape_html(text)}</p>' if text else ""


def create_email_template(
    content: EmailContent,
    *,
    subject: str = DEFAULT_SUBJECT,
    recipient: str = DEFAULT_RECIPIENT,
    sender: str = DEFAULT_SENDER,
    template: EmailTemplate | str = EmailTemplate.PRETTY,
    format: EmailFormat | str = EmailFormat.HTML,
) -> str:
    """Lay out ``content`` as an HTML or plain-text email.

    Args:
        content (EmailContent): Greeting, body, closing and signature.
        subject (str): Subject line; also the HTML ``<title>``.
        recipient (str): Shown in the ``To`` header.
        sender (str): Shown in the ``From`` header.
        template (EmailTemplate | str): Header color scheme (HTML only).
        format (EmailFormat | str): ``html`` or ``text``.

    Returns:
        str: The email document.

    Raises:
        ValueError: If ``format`` is not a known email format.
    """
    if EmailFormat(format) is EmailFormat.TEXT:
        return create_text_email(content, subject=subject, recipient=recipient, sender=sender)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape_html(subject)}</title>
    <style>
        {get_template_styles(template)}
    </style>
</head>
<body>
    <div class="email-container">
        <div class="email-header">
            <h1 class="email-subject">{escape_html(subject)}</h1>
            <div class="email-meta">
                <p><strong>To:</strong> {escape_html(recipient)}</p>
                <p><strong>From:</strong> {escape_html(sender)}</p>
            </div>
        </div>

        <div class="email-body">
            {_optional_paragraph("greeting", content.greeting)}
            <div class="content">
                {content.body}
            </div>
            {_optional_paragraph("closing", content.closing)}
            {_optional_paragraph("signature", content.signature)}
        </div>

        <div class="email-footer">
            <p class="footer-text">{GENERATED_WITH}</p>
        </div>
    </div>
</body>
</html>"""


def create_text_email(
    content: EmailContent,
    *,
    subject: str = DEFAULT_SUBJECT,
    recipient: str = DEFAULT_RECIPIENT,
    sender: str = DEFAULT_SENDER,
) -> str:
    """Lay out ``content`` as a plain-text email with a header block and footer."""
    return f"""Subject: {subject}
To: {recipient}
From: {sender}

{content.greeting or ""}

{content.body}

{content.closing or ""}

{content.signature or ""}

---
{GENERATED_WITH}"""


def create_formatted_email_content(
    text: str,
    *,
    greeting: str | None = None,
    closing: str | None = None,
    signature: str | None = None,
    bold: bool = False,
    italic: bool = False,
    color: str | None = None,
) -> EmailContent:
    """Build an `EmailContent` whose body is ``text`` with inline HTML formatting.

    See `format_inline_html` for how ``bold``, ``italic`` and ``color`` apply.
    """
    body = format_inline_html(text, bold=bold, italic=italic, color=color)
    return EmailContent(body=body, greeting=greeting, closing=closing, signature=signature)
