# topmark:header:start
#
#   project      : TextAlchemy
#   file         : email.py
#   file_relpath : src/textalchemy/cli/commands/email.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy `email` command.

Builds an HTML or plain-text email around TEXT with optional greeting,
closing and signature lines.
"""

from __future__ import annotations

import click

from textalchemy.cli.cli_types import EnumChoiceParam
from textalchemy.cli.cmd_common import collect_text, get_console
from textalchemy.cli.options import inline_style_options
from textalchemy.templates.email import (
    DEFAULT_RECIPIENT,
    DEFAULT_SENDER,
    DEFAULT_SUBJECT,
    EmailContent,
    EmailFormat,
    EmailTemplate,
    create_email_template,
    create_formatted_email_content,
)


@click.command(
    name="email",
    help="Create an email around TEXT (reads STDIN when TEXT is omitted).",
)
@click.argument("words", metavar="[TEXT]...", nargs=-1)
@click.option("--subject", default=DEFAULT_SUBJECT, show_default=True, help="Email subject.")
@click.option("--recipient", default=DEFAULT_RECIPIENT, show_default=True, help="Recipient.")
@click.option("--sender", default=DEFAULT_SENDER, show_default=True, help="Sender.")
@click.option(
    "--template",
    type=EnumChoiceParam(EmailTemplate),
    default=EmailTemplate.PRETTY.value,
    show_default=True,
    help=f"Header color scheme ({', '.join(t.value for t in EmailTemplate)}).",
)
@click.option(
    "--format",
    "email_format",
    type=EnumChoiceParam(EmailFormat),
    default=EmailFormat.HTML.value,
    show_default=True,
    help=f"Email format ({', '.join(f.value for f in EmailFormat)}).",
)
@click.option("--greeting", default=None, help="Greeting line.")
@click.option("--closing", default=None, help="Closing line.")
@click.option("--signature", default=None, help="Signature line.")
@inline_style_options
@click.pass_context
def email_command(
    ctx: click.Context,
    *,
    words: tuple[str, ...],
    subject: str,
    recipient: str,
    sender: str,
    template: EmailTemplate,
    email_format: EmailFormat,
    greeting: str | None,
    closing: str | None,
    signature: str | None,
    bold: bool,
    italic: bool,
    text_color: str | None,
) -> None:
    """Create an email and print it."""
    console = get_console(ctx)
    text = collect_text(words)

    content: EmailContent
    if email_format is EmailFormat.TEXT:
        # Plain-text bodies carry no markup.
        content = EmailContent(body=text, greeting=greeting, closing=closing, signature=signature)
    else:
        content = create_formatted_email_content(
            text,
            greeting=greeting,
            closing=closing,
            signature=signature,
            bold=bold,
            italic=italic,
            color=text_color,
        )

    console.print(
        create_email_template(
            content,
            subject=subject,
            recipient=recipient,
            sender=sender,
            template=template,
            format=email_format,
        )
    )
