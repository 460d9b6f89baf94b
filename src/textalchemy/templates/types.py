# topmark:header:start
#
#   project      : TextAlchemy
#   file         : types.py
#   file_relpath : src/textalchemy/templates/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template vocabulary shared by the page and email templates."""

from __future__ import annotations

from enum import Enum


class TemplateStyle(str, Enum):
    """Visual variants of the page template.

    Attributes:
        SIMPLE: Light card on a pale background.
        BEAUTIFUL: Dark glass card on a gradient, colored tree classes.
        PROFESSIONAL: White sheet with a title banner.
    """

    SIMPLE = "simple"
    BEAUTIFUL = "beautiful"
    PROFESSIONAL = "professional"


class Audience(str, Enum):
    """Where the document will be displayed.

    Attributes:
        WEB: A browser page; roomier layout.
        EMAIL: An HTML email body; narrower, tighter padding.
    """

    WEB = "web"
    EMAIL = "email"
