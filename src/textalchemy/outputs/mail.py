# topmark:header:start
#
#   project      : TextAlchemy
#   file         : mail.py
#   file_relpath : src/textalchemy/outputs/mail.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mail payload assembly.

Builds the ``html``/``text`` pair a mail transport needs from a single HTML
content fragment. Sending is out of scope; this module only prepares strings.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Final

from textalchemy.constants import DEFAULT_TITLE
from textalchemy.templates import prepare_html_output
from textalchemy.templates.types import Audience, TemplateStyle

_TAG: Final[re.Pattern[str]] = re.compile(r"<[^>]+>")
_SPACE_BEFORE_NEWLINE: Final[re.Pattern[str]] = re.compile(r"\s+\n")
_EXCESS_BLANK_LINES: Final[re.Pattern[str]] = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class MailPayload:
    """The two alternative bodies of a multipart email."""

    html: str
    text: str


def strip_html(value: str) -> str:
    """Remove tags from ``value``, unescape entities and tidy whitespace before newlines."""
    text = _TAG.sub("", value)
    text = _SPACE_BEFORE_NEWLINE.sub("\n", text)
    return html.unescape(text).strip()


def prepare_text_output(text: str) -> str:
    """Normalize a plain-text body.

    Line endings become ``\\n``, trailing whitespace is dropped from each line
    and runs of blank lines are limited to one.
    """
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    joined = "\n".join(line.rstrip() for line in lines)
    return _EXCESS_BLANK_LINES.sub("\n\n", joined).strip()


def build_mail_payload(
    content: str,
    *,
    html: str | None = None,
    text: str | None = None,
    template: TemplateStyle | str | None = TemplateStyle.SIMPLE,
    title: str = DEFAULT_TITLE,
) -> MailPayload:
    """Return the ``html``/``text`` pair for ``content``.

    Args:
        content (str): HTML content fragment.
        html (str | None): Explicit HTML body; defaults to ``content`` wrapped in
            ``template`` for the email audience.
        text (str | None): Explicit text body; defaults to ``content`` with tags
            stripped, normalized by `prepare_text_output`.
        template (TemplateStyle | str | None): Page template; None keeps ``content`` bare.
        title (str): Document title for the wrapped HTML.
    """
    html_body = (
        html
        if html is not None
        else prepare_html_output(content, template=template, title=title, audience=Audience.EMAIL)
    )
    text_body = text if text is not None else prepare_text_output(strip_html(content))
    return MailPayload(html=html_body, text=text_body)
