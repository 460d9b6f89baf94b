# topmark:header:start
#
#   project      : TextAlchemy
#   file         : constants.py
#   file_relpath : src/textalchemy/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextAlchemy Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TEXTALCHEMY_VERSION: str = get_version("textalchemy")

DEFAULT_TITLE: Final[str] = "Text Alchemy"
DEFAULT_DEPTH: Final[int] = 3
DEFAULT_INDENT: Final[str] = "   "

# Markdown nesting unit; fixed, not configurable.
MARKDOWN_INDENT: Final[str] = "  "

ELLIPSIS: Final[str] = "…"

CONFIG_FILE_NAME: Final[str] = "textalchemy.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "textalchemy"

LOG_LEVEL_ENV_VAR: Final[str] = "TEXTALCHEMY_LOG_LEVEL"

GENERATED_WITH: Final[str] = "Generated with Text Alchemy"
