# topmark:header:start
#
#   project      : TextAlchemy
#   file         : cli_types.py
#   file_relpath : src/textalchemy/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types for TextAlchemy.

Custom Click parameter types live here so every command converts enum names
and depth budgets the same way.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Generic, NoReturn, Protocol, TypeVar, cast

import click

from textalchemy.config.loader import parse_depth

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    from textalchemy.core.values import Depth

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumChoiceParam
E = TypeVar("E", bound=Enum)

#: Depth value meaning "the input's own nesting depth" (``parse`` only).
AUTO_DEPTH: Final[str] = "auto"


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        # Enums used on the command line expose string-valued members
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (case-insensitively) to a member of the Enum."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in self.enum_cls
        }

        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_TEXTALCHEMY_COMPLETE=bash_source textalchemy)"`
        """
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]


class DepthParam(ParamTypeBase):
    """Click parameter type for traversal budgets.

    Accepts an integer ``>= -1`` or ``all``/``inf``/``unbounded``. With
    ``allow_auto`` the literal ``auto`` is also accepted and passed through as
    `AUTO_DEPTH`.
    """

    name = "depth"

    def __init__(self, *, allow_auto: bool = False) -> None:
        self.allow_auto = allow_auto

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Depth | str | None:
        """Convert the option text to a depth budget."""
        if value is None:
            return None
        if self.allow_auto and str(value).strip().lower() == AUTO_DEPTH:
            return AUTO_DEPTH
        try:
            return parse_depth(value)
        except ValueError as exc:
            message = f"{exc} ('auto' is also accepted)" if self.allow_auto else str(exc)
            raise click.BadParameter(message, param=param, ctx=ctx) from exc

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Return the metavar shown in ``--help``."""
        return "[N|all|auto]" if self.allow_auto else "[N|all]"
