# topmark:header:start
#
#   project      : TextAlchemy
#   file         : __init__.py
#   file_relpath : src/textalchemy/templates/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canned HTML page and email templates.

`wrap` is the single entry point for page chrome: given a content fragment, a
title, a `TemplateStyle` and an `Audience` it returns a complete HTML document.
Content is inserted verbatim (it is usually the output of the HTML tree
renderer); titles are escaped.
"""

from __future__ import annotations

from typing import Callable, Final

from textalchemy.constants import DEFAULT_TITLE
from textalchemy.templates.beautiful import apply_beautiful_template
from textalchemy.templates.professional import apply_professional_template
from textalchemy.templates.simple import apply_simple_template
from textalchemy.templates.types import Audience, TemplateStyle

TemplateFn = Callable[..., str]

_TEMPLATES: Final[dict[TemplateStyle, TemplateFn]] = {
    TemplateStyle.SIMPLE: apply_simple_template,
    TemplateStyle.BEAUTIFUL: apply_beautiful_template,
    TemplateStyle.PROFESSIONAL: apply_professional_template,
}


def wrap(
    content: str,
    *,
    title: str = DEFAULT_TITLE,
    style: TemplateStyle | str = TemplateStyle.SIMPLE,
    audience: Audience | str = Audience.WEB,
) -> str:
    """Wrap ``content`` in a full HTML document.

    Args:
        content (str): Trusted HTML fragment.
        title (str): Document title.
        style (TemplateStyle | str): Visual variant.
        audience (Audience | str): ``web`` or ``email`` layout.

    Returns:
        str: The complete document.

    Raises:
        ValueError: If ``style`` or ``audience`` is not a known value.
    """
    apply = _TEMPLATES[TemplateStyle(style)]
    return apply(content, title=title, audience=Audience(audience))


def prepare_html_output(
    content: str,
    *,
    template: TemplateStyle | str | None = TemplateStyle.SIMPLE,
    title: str = DEFAULT_TITLE,
    audience: Audience | str = Audience.WEB,
) -> str:
    """Return ``content`` wrapped in ``template``, or unchanged when ``template`` is None."""
    if template is None:
        return content
    return wrap(content, title=title, style=template, audience=audience)


__all__ = [
    "Audience",
    "TemplateStyle",
    "prepare_html_output",
    "wrap",
]
